from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from inventory_viewer.config.loader import load_global_config
from inventory_viewer.core.dataset_store import DatasetStore
from inventory_viewer.core.exceptions import FetchError
from inventory_viewer.loaders.base import DatasetLoader
from inventory_viewer.loaders.sheet_loader import SheetLoader
from inventory_viewer.ui.layout.build_layout import build_layout
from inventory_viewer.ui.callbacks.callbacks_data import register_data_callbacks
from inventory_viewer.ui.callbacks.callbacks_filters import register_filter_callbacks
from inventory_viewer.ui.callbacks.callbacks_table import register_table_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    loader: Optional[DatasetLoader] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Dataset store + loader
    if loader is None:
        source = global_config.source
        loader = SheetLoader(
            source.url,
            timeout_seconds=source.timeout_seconds,
            retries=source.retries,
        )
    store = DatasetStore(loader)

    # 3) Initial fetch; the app still starts (empty) if the sheet is unreachable
    initial_fetch_error: Optional[str] = None
    try:
        store.load()
    except FetchError as e:
        initial_fetch_error = str(e)
        logger.warning("Starting with an empty dataset: %s", e)

    # 4) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        store=store,
        initial_fetch_error=initial_fetch_error,
    )

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY, dbc.icons.BOOTSTRAP],
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_data_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_table_callbacks(app, ctx)

    return app
