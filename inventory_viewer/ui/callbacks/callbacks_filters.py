from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

import dash
from dash import Input, Output, State

from inventory_viewer.core.query import Query
from inventory_viewer.ui.helpers import query_from_controls
from inventory_viewer.ui.ids import IDs, all_filter_selects

if TYPE_CHECKING:
    from inventory_viewer.ui.config import AppConfig


def cleared_controls(
    query_data: Optional[Dict[str, Any]],
    ids: Sequence[Dict[str, Any]],
) -> Tuple[str, List[Optional[str]]]:
    """Search box value and one dropdown value per id after Clear Filters."""
    query = Query.from_dict(query_data or {}).cleared()
    return query.search, [query.selections.get(i["field"]) for i in ids]


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Controls -> query store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.QUERY, "data"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(all_filter_selects(), "value"),
        State(all_filter_selects(), "id"),
    )
    def sync_query(search, values, ids):
        query = query_from_controls(search, values or [], ids or [])
        return query.to_dict()

    # ---------------------------------------------------------
    # Clear search + every dropdown
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(all_filter_selects(), "value"),
        Input(IDs.Control.CLEAR_FILTERS_BTN, "n_clicks"),
        State(IDs.Store.QUERY, "data"),
        State(all_filter_selects(), "id"),
        prevent_initial_call=True,
    )
    def clear_filters(n_clicks, query_data, ids):
        return cleared_controls(query_data, ids or [])
