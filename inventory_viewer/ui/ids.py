from __future__ import annotations

from dash import ALL

__all__ = ["IDs", "filter_select_id", "all_filter_selects"]


class IDs:
    class Store:
        QUERY = "query-state"
        DATASET_VERSION = "dataset-version"

    class Control:
        REFRESH_BTN = "refresh-btn"
        FETCH_STATUS = "fetch-status"

        SEARCH_INPUT = "search-input"
        CLEAR_FILTERS_BTN = "clear-filters-btn"
        RESULT_COUNT = "result-count"

        PRODUCTS_TABLE_CONTAINER = "products-table-container"

    class Pattern:
        # pattern-matching "type" strings
        FILTER_SELECT = "filter-select"


def filter_select_id(field_name: str) -> dict:
    return {"type": IDs.Pattern.FILTER_SELECT, "field": field_name}


def all_filter_selects() -> dict:
    return {"type": IDs.Pattern.FILTER_SELECT, "field": ALL}
