from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from inventory_viewer.ui.ids import IDs


def build_table_panel() -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            dcc.Loading(
                id="products-table-loading",
                type="default",
                children=html.Div(id=IDs.Control.PRODUCTS_TABLE_CONTAINER),
            ),
            className="p-0",
        ),
        className="inv-table-card shadow-sm",
    )
