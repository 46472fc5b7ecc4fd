from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from inventory_viewer.config.model import GlobalConfig
from inventory_viewer.ui.ids import IDs


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                dbc.Button(
                    [html.I(className="bi bi-arrow-clockwise me-2"), "Refresh"],
                    id=IDs.Control.REFRESH_BTN,
                    color="primary",
                    className="ms-auto",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm inv-navbar",
    )
