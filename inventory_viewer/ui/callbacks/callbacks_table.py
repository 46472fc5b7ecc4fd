from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

import dash
from dash import Input, Output, State

from inventory_viewer.core.query import Query
from inventory_viewer.core.query_engine import run_query
from inventory_viewer.ui.helpers import dropdown_options, products_table, result_count_text
from inventory_viewer.ui.ids import IDs, all_filter_selects

if TYPE_CHECKING:
    from inventory_viewer.ui.config import AppConfig


def render_query(
    ctx: AppConfig,
    query_data: Optional[Dict[str, Any]],
    ids: Sequence[Dict[str, Any]],
):
    """
    Run the stored query against the store's current snapshot.

    Returns (table, count text, dropdown options per id). Options always come
    from the snapshot being rendered, so a refresh never shows stale choices.
    """
    query = Query.from_dict(query_data or {})
    result = run_query(ctx.store.current(), query, ctx.profile)

    options = [dropdown_options(result.options.get(i["field"], [])) for i in ids]

    return (
        products_table(result.records),
        result_count_text(result.matched, result.total),
        options,
    )


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Dataset or query changed: recompute rows, count and options
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.PRODUCTS_TABLE_CONTAINER, "children"),
        Output(IDs.Control.RESULT_COUNT, "children"),
        Output(all_filter_selects(), "options"),
        Input(IDs.Store.QUERY, "data"),
        Input(IDs.Store.DATASET_VERSION, "data"),
        State(all_filter_selects(), "id"),
    )
    def update_table(query_data, dataset_version, ids):
        return render_query(ctx, query_data, ids or [])
