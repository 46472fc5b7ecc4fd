from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from inventory_viewer.core.exceptions import InvalidFieldError

DEFAULT_SEARCH_FIELDS: Tuple[str, ...] = ("BARCODE", "NAMA PRODUK")
DEFAULT_FILTER_FIELDS: Tuple[str, ...] = ("DIVISI", "KATEGORI", "SUPPLIER")


def is_unconstrained(value: Optional[str]) -> bool:
    """None and "" both mean "no selection" (the dropdown's "All ..." entry)."""
    return value is None or value == ""


@dataclass(frozen=True)
class QueryProfile:
    """
    Declares which fields a query may touch.

    Fields:

    - search_fields: fields matched by the free-text search (substring, case-insensitive)
    - filter_fields: fields offered as exact-match dropdown filters
    """
    search_fields: Tuple[str, ...] = DEFAULT_SEARCH_FIELDS
    filter_fields: Tuple[str, ...] = DEFAULT_FILTER_FIELDS

    def require_filterable(self, field_name: str) -> None:
        if field_name not in self.filter_fields:
            raise InvalidFieldError(field_name, self.filter_fields)


DEFAULT_PROFILE = QueryProfile()


@dataclass(frozen=True)
class Query:
    """
    Current user query: search term plus per-field dropdown selections.

    - search: free text; "" disables the search predicate
    - selections: filter field -> selected value, None / "" = unconstrained
    """
    search: str = ""
    selections: Mapping[str, Optional[str]] = field(default_factory=dict)

    def active_selections(self) -> Dict[str, str]:
        """Only the fields that actually constrain the result."""
        return {k: v for k, v in self.selections.items() if not is_unconstrained(v)}

    @property
    def is_empty(self) -> bool:
        return self.search == "" and not self.active_selections()

    def with_search(self, search: Optional[str]) -> Query:
        return Query(search=search or "", selections=dict(self.selections))

    def with_selection(self, field_name: str, value: Optional[str]) -> Query:
        selections = dict(self.selections)
        selections[field_name] = value
        return Query(search=self.search, selections=selections)

    def cleared(self) -> Query:
        """Reset search and every selection, keeping the field keys."""
        return Query(search="", selections={k: None for k in self.selections})

    def to_dict(self) -> Dict[str, Any]:
        return {"search": self.search, "selections": dict(self.selections)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Query:
        selections = data.get("selections") or {}
        return cls(
            search=str(data.get("search") or ""),
            selections={str(k): (None if is_unconstrained(v) else str(v)) for k, v in selections.items()},
        )
