from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from inventory_viewer.core.query import Query
from inventory_viewer.core.query_engine import compute_all_filter_options
from inventory_viewer.ui.ids import IDs
from inventory_viewer.ui.layout.build_filter_panel import build_filter_panel
from inventory_viewer.ui.layout.build_navbar import build_navbar
from inventory_viewer.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from inventory_viewer.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    dataset = ctx.store.current()
    options = compute_all_filter_options(dataset, ctx.profile)

    initial_query = Query(selections={f: None for f in ctx.profile.filter_fields})

    if ctx.initial_fetch_error:
        status = dbc.Alert(
            "Failed to fetch products",
            color="danger",
            dismissable=True,
            className="mb-3",
        )
    else:
        status = None

    return dbc.Container(
        fluid=True,
        className="inv-root",
        children=[
            build_navbar(ctx.global_config),

            # App-level stores
            dcc.Store(id=IDs.Store.QUERY, data=initial_query.to_dict()),
            dcc.Store(id=IDs.Store.DATASET_VERSION, data=ctx.store.version),

            html.Div(
                [
                    html.Div(status, id=IDs.Control.FETCH_STATUS),
                    build_filter_panel(ctx.global_config, options, len(dataset)),
                    build_table_panel(),
                ],
                className="inv-main mt-3",
            ),
        ],
    )
