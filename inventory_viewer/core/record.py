from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from inventory_viewer.core.exceptions import RecordSchemaError

logger = logging.getLogger(__name__)


# Source column label -> ProductRecord attribute.
# Labels are the sheet headers verbatim (note the double space in the daily qty column).
FIELD_ATTRS: Dict[str, str] = {
    "BARCODE": "barcode",
    "NAMA PRODUK": "nama_produk",
    "HBELI": "hbeli",
    "HJUAL": "hjual",
    "MARGIN": "margin",
    "DIVISI": "divisi",
    "DEPARTEMEN": "departemen",
    "KATEGORI": "kategori",
    "SUBKATEGORI": "subkategori",
    "SUPPLIER": "supplier",
    "QTY TERJUAL": "qty_terjual",
    "QTY TERJUAL PERBULAN": "qty_terjual_perbulan",
    "QTY TERJUAL  PERHARI": "qty_terjual_perhari",
    "STOK": "stok",
    "ITO": "ito",
}

FIELD_NAMES: Tuple[str, ...] = tuple(FIELD_ATTRS)


@dataclass(frozen=True)
class ProductRecord:
    """
    One inventory item as delivered by the sheet.

    Every field is an optional string. Numeric columns (prices, margin,
    quantities, stock, ITO) stay in the sheet's string format; nothing is
    parsed or recomputed.
    """
    barcode: Optional[str] = None
    nama_produk: Optional[str] = None
    hbeli: Optional[str] = None
    hjual: Optional[str] = None
    margin: Optional[str] = None
    divisi: Optional[str] = None
    departemen: Optional[str] = None
    kategori: Optional[str] = None
    subkategori: Optional[str] = None
    supplier: Optional[str] = None
    qty_terjual: Optional[str] = None
    qty_terjual_perbulan: Optional[str] = None
    qty_terjual_perhari: Optional[str] = None
    stok: Optional[str] = None
    ito: Optional[str] = None

    def get(self, field_name: str) -> Optional[str]:
        """Dict-style access by source column label."""
        attr = FIELD_ATTRS.get(field_name)
        if attr is None:
            raise KeyError(field_name)
        return getattr(self, attr)

    def to_row(self) -> Dict[str, Optional[str]]:
        """Return the record keyed by source column labels, in schema order."""
        return {label: getattr(self, attr) for label, attr in FIELD_ATTRS.items()}

    @classmethod
    def from_raw(cls, raw: Any) -> ProductRecord:
        """
        Build a record from one row of the JSON payload.

        - unknown keys are dropped
        - empty strings become None
        - non-string scalars (numbers, bools) are converted with str()
        """
        if not isinstance(raw, Mapping):
            raise RecordSchemaError(f"Expected a JSON object per row, got {type(raw).__name__}")

        values: Dict[str, Optional[str]] = {}
        unknown = []
        for key, value in raw.items():
            attr = FIELD_ATTRS.get(key)
            if attr is None:
                unknown.append(key)
                continue
            values[attr] = _normalise_value(key, value)

        if unknown:
            logger.debug("Dropping unknown columns from row: %s", unknown)

        return cls(**values)


def _normalise_value(key: str, value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (dict, list, tuple, set)):
        raise RecordSchemaError(f"Column '{key}' holds a nested value; expected a scalar")
    text = value if isinstance(value, str) else str(value)
    return text if text != "" else None


