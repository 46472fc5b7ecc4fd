"""
Dataset loaders: anything that can produce a fresh Dataset on demand.
"""

from .base import DatasetLoader
from .sheet_loader import SheetLoader

__all__ = ["DatasetLoader", "SheetLoader"]
