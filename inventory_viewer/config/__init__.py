"""
Config package for inventory_viewer.

Responsible for:
- config models (GlobalConfig, SourceConfig, FilterFieldConfig)
- config I/O helpers (load_global_config)
"""

from .model import GlobalConfig, SourceConfig, FilterFieldConfig
from .loader import load_global_config
