from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output

from inventory_viewer.core.exceptions import FetchError
from inventory_viewer.ui.ids import IDs

if TYPE_CHECKING:
    from inventory_viewer.ui.config import AppConfig

logger = logging.getLogger(__name__)


def reload_dataset(ctx: AppConfig):
    """
    Re-fetch the sheet into the store.

    Returns (new dataset version, status banner). On failure the version is
    left as dash.no_update so the previous snapshot stays on screen.
    """
    try:
        ctx.store.load()
    except FetchError as e:
        logger.warning("Refresh failed: %s", e)
        alert = dbc.Alert(
            "Failed to fetch products",
            color="danger",
            dismissable=True,
            className="mb-3",
        )
        return dash.no_update, alert

    return ctx.store.version, None


def register_data_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Refresh: re-fetch the sheet, bump the dataset version
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.DATASET_VERSION, "data"),
        Output(IDs.Control.FETCH_STATUS, "children"),
        Input(IDs.Control.REFRESH_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def refresh_dataset(n_clicks: int | None):
        return reload_dataset(ctx)
