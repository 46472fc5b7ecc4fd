from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from dash import dash_table, html

from inventory_viewer.core.dataset import Dataset
from inventory_viewer.core.query import Query

# (column label in the sheet, table header)
TABLE_COLUMNS: List[Tuple[str, str]] = [
    ("BARCODE", "Barcode"),
    ("NAMA PRODUK", "Nama Produk"),
    ("HBELI", "H. Beli"),
    ("HJUAL", "H. Jual"),
    ("MARGIN", "Margin"),
    ("DIVISI", "Divisi"),
    ("DEPARTEMEN", "Departemen"),
    ("KATEGORI", "Kategori"),
    ("SUBKATEGORI", "Subkategori"),
    ("SUPPLIER", "Supplier"),
    ("QTY TERJUAL", "Qty Terjual"),
    ("QTY TERJUAL PERBULAN", "Qty/Bulan"),
    ("QTY TERJUAL  PERHARI", "Qty/Hari"),
    ("STOK", "Stok"),
    ("ITO", "ITO"),
]

NO_PRODUCTS_TEXT = "No products found"


def dropdown_options(values: Sequence[str]) -> List[dict]:
    return [{"label": v, "value": v} for v in values]


def query_from_controls(
    search: Optional[str],
    values: Sequence[Optional[str]],
    ids: Sequence[Dict[str, Any]],
) -> Query:
    """
    Build a Query from the search box and the pattern-matched filter
    dropdowns (values and ids arrive in the same order).
    """
    query = Query().with_search(search)
    for component_id, value in zip(ids, values):
        query = query.with_selection(component_id["field"], value or None)
    return query


def result_count_text(matched: int, total: int) -> str:
    return f"Showing {matched} of {total} products"


def products_table(records: Dataset):
    """
    Styled Dash DataTable of the filtered products, or the empty-state
    message when nothing matches.
    """
    if len(records) == 0:
        return html.Div(NO_PRODUCTS_TEXT, className="text-center text-muted py-5")

    return dash_table.DataTable(
        data=records.to_rows(),
        columns=[{"name": header, "id": col} for col, header in TABLE_COLUMNS],

        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": 'system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif',
            "fontSize": "13px",
            "padding": "8px 12px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "280px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
        },
        style_header={
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data_conditional=[
            {"if": {"state": "active"}, "backgroundColor": "#f9fafb", "border": "none"},
        ],
        sort_action="none",
        filter_action="none",
        page_action="none",
    )
