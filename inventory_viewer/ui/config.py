from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from inventory_viewer.config.model import GlobalConfig
from inventory_viewer.core.dataset_store import DatasetStore
from inventory_viewer.core.query import QueryProfile


@dataclass
class AppConfig:
    """
    Holds shared state for the Dash app: config, the dataset store and the
    query profile. This is passed into layout + callback registration
    functions instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    store: DatasetStore
    initial_fetch_error: str | None = None

    @property
    def profile(self) -> QueryProfile:
        return self.global_config.profile
