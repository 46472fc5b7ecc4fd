from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np
import pandas as pd

from inventory_viewer.core.exceptions import RecordSchemaError
from inventory_viewer.core.record import FIELD_NAMES, ProductRecord


class Dataset(Sequence):
    """
    Immutable, ordered collection of ProductRecords (source order).

    Includes:
    - Sequence access to the records themselves
    - Lazily built, cached pandas columns for vectorised matching
    - Cached distinct-value lists per column (dropdown options)

    A Dataset is never mutated after construction; a refresh builds a new
    one, so every cache here is keyed by Dataset identity for free.
    """

    def __init__(
        self,
        records: Iterable[ProductRecord] = (),
        source: Optional[str] = None,
        loaded_at: Optional[datetime] = None,
    ) -> None:
        self._records: Tuple[ProductRecord, ...] = tuple(records)
        self.source = source
        self.loaded_at = loaded_at

        self._frame: Optional[pd.DataFrame] = None
        self._distinct_cache: Dict[str, Tuple[str, ...]] = {}

    @classmethod
    def from_raw(
        cls,
        rows: Iterable[Any],
        source: Optional[str] = None,
        loaded_at: Optional[datetime] = None,
    ) -> Dataset:
        """
        Materialise a Dataset from the decoded JSON payload (a list of objects).
        Raises RecordSchemaError on the first row that is not an object.
        """
        records: List[ProductRecord] = []
        for idx, row in enumerate(rows):
            try:
                records.append(ProductRecord.from_raw(row))
            except RecordSchemaError as e:
                raise RecordSchemaError(f"Row {idx}: {e}") from e
        return cls(records, source=source, loaded_at=loaded_at)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------
    def __getitem__(self, index):
        return self._records[index]

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"Dataset(n_records={len(self._records)}, source={self.source!r})"

    @property
    def records(self) -> Tuple[ProductRecord, ...]:
        return self._records

    # -------------------------------------------------------------------------
    # Column access (cached)
    # -------------------------------------------------------------------------
    @property
    def frame(self) -> pd.DataFrame:
        """
        Column-oriented view of the records, one object-dtype column per
        known field. Missing values are None.
        """
        if self._frame is None:
            self._frame = pd.DataFrame.from_records(
                [r.to_row() for r in self._records],
                columns=list(FIELD_NAMES),
            ).astype(object)
        return self._frame

    def column(self, field_name: str) -> pd.Series:
        if field_name not in FIELD_NAMES:
            raise KeyError(field_name)
        return self.frame[field_name]

    def distinct_values(self, field_name: str) -> Tuple[str, ...]:
        """
        Distinct non-empty values of a column, sorted ascending
        (case-sensitive code-point order). Cached per Dataset.
        """
        cached = self._distinct_cache.get(field_name)
        if cached is not None:
            return cached

        series = self.column(field_name).dropna()
        values = tuple(sorted({v for v in series if v != ""}))
        self._distinct_cache[field_name] = values
        return values

    # -------------------------------------------------------------------------
    # Subsetting
    # -------------------------------------------------------------------------
    def take(self, mask: np.ndarray) -> Dataset:
        """
        Return a new Dataset holding the records where mask is True,
        preserving order.
        """
        mask = np.asarray(mask, dtype=bool)
        if mask.shape != (len(self._records),):
            raise ValueError(
                f"Mask length {mask.shape} does not match dataset size {len(self._records)}"
            )

        if mask.all():
            return self

        kept = [r for r, keep in zip(self._records, mask) if keep]
        return Dataset(kept, source=self.source, loaded_at=self.loaded_at)

    def to_rows(self) -> List[Dict[str, Optional[str]]]:
        """Records as plain dicts keyed by column label (for tables / JSON)."""
        return [r.to_row() for r in self._records]
