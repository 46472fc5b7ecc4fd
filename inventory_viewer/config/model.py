from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from inventory_viewer.core.query import DEFAULT_SEARCH_FIELDS, QueryProfile


@dataclass(frozen=True)
class SourceConfig:
    """
    Where the inventory sheet is fetched from.
    """
    url: str
    timeout_seconds: float = 20.0
    retries: int = 2

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], url_override: Optional[str] = None) -> SourceConfig:
        return cls(
            url=url_override or raw.get("url", ""),
            timeout_seconds=float(raw.get("timeout_seconds", 20.0)),
            retries=int(raw.get("retries", 2)),
        )


@dataclass(frozen=True)
class FilterFieldConfig:
    """
    One dropdown filter: the column it constrains and how it is labelled.
    """
    field: str
    label: str
    placeholder: str

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> FilterFieldConfig:
        name = raw["field"]
        label = raw.get("label") or name.title()
        return cls(
            field=name,
            label=label,
            placeholder=raw.get("placeholder") or f"All {label}",
        )


DEFAULT_FILTERS: List[FilterFieldConfig] = [
    FilterFieldConfig("DIVISI", "Divisi", "All Divisi"),
    FilterFieldConfig("KATEGORI", "Kategori", "All Kategori"),
    FilterFieldConfig("SUPPLIER", "Supplier", "All Suppliers"),
]


@dataclass
class GlobalConfig:
    source: SourceConfig
    ui_title: str = "Inventory Viewer"
    subtitle: str = "Product stock & sales overview"
    search_fields: List[str] = field(default_factory=lambda: list(DEFAULT_SEARCH_FIELDS))
    filters: List[FilterFieldConfig] = field(default_factory=lambda: list(DEFAULT_FILTERS))

    @property
    def profile(self) -> QueryProfile:
        return QueryProfile(
            search_fields=tuple(self.search_fields),
            filter_fields=tuple(f.field for f in self.filters),
        )

    def filter_config(self, field_name: str) -> Optional[FilterFieldConfig]:
        return next((f for f in self.filters if f.field == field_name), None)
