"""
Top-level package for the inventory viewer.

This package exposes the core architecture (domain, loaders, UI adapters).
Most code should import from submodules such as:
    inventory_viewer.core
    inventory_viewer.loaders
    inventory_viewer.ui
"""

__all__: list[str] = []
