from __future__ import annotations

from typing import Dict, List

import dash_bootstrap_components as dbc
from dash import dcc, html

from inventory_viewer.config.model import GlobalConfig
from inventory_viewer.ui.helpers import dropdown_options, result_count_text
from inventory_viewer.ui.ids import IDs, filter_select_id


def build_filter_panel(
    global_config: GlobalConfig,
    options: Dict[str, List[str]],
    total: int,
) -> dbc.Card:
    search_labels = " or ".join(name.title() for name in global_config.search_fields)

    filter_cols = [
        dbc.Col(
            [
                html.Label(f.label, className="form-label"),
                dcc.Dropdown(
                    id=filter_select_id(f.field),
                    options=dropdown_options(options.get(f.field, [])),
                    value=None,
                    placeholder=f.placeholder,
                ),
            ],
            md=True,
        )
        for f in global_config.filters
    ]

    clear_col = dbc.Col(
        dbc.Button(
            "Clear Filters",
            id=IDs.Control.CLEAR_FILTERS_BTN,
            color="secondary",
            outline=True,
            className="w-100",
        ),
        md=True,
        className="d-flex align-items-end",
    )

    return dbc.Card(
        dbc.CardBody(
            [
                dbc.InputGroup(
                    [
                        dbc.InputGroupText(html.I(className="bi bi-search")),
                        dbc.Input(
                            id=IDs.Control.SEARCH_INPUT,
                            type="text",
                            value="",
                            debounce=True,
                            placeholder=f"Search by {search_labels}...",
                        ),
                    ],
                    className="mb-3",
                ),
                dbc.Row(filter_cols + [clear_col], className="g-3 mb-3"),
                html.Div(
                    result_count_text(total, total),
                    id=IDs.Control.RESULT_COUNT,
                    className="small text-muted",
                ),
            ]
        ),
        className="inv-filter-card shadow-sm mb-3",
    )
