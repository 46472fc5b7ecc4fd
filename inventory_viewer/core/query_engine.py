"""
Stateless query engine over a Dataset.

Two operations, both pure functions of their inputs:
- compute_filter_options: distinct sorted values for a filterable field
- filter_dataset: records matching the search term AND every active selection

run_query bundles both for the presentation layer.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from inventory_viewer.core.dataset import Dataset
from inventory_viewer.core.exceptions import InvalidFieldError
from inventory_viewer.core.query import DEFAULT_PROFILE, Query, QueryProfile
from inventory_viewer.core.record import FIELD_NAMES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryResult:
    """Everything the table view needs after a dataset or query change."""
    records: Dataset
    options: Dict[str, List[str]]
    total: int

    @property
    def matched(self) -> int:
        return len(self.records)


def compute_filter_options(
    dataset: Dataset,
    field_name: str,
    profile: QueryProfile = DEFAULT_PROFILE,
) -> List[str]:
    """
    Distinct non-empty values of `field_name`, sorted ascending.

    Raises InvalidFieldError if the field is not declared filterable.
    """
    profile.require_filterable(field_name)
    return list(dataset.distinct_values(field_name))


def compute_all_filter_options(
    dataset: Dataset,
    profile: QueryProfile = DEFAULT_PROFILE,
) -> Dict[str, List[str]]:
    return {f: compute_filter_options(dataset, f, profile) for f in profile.filter_fields}


def _validate_query(query: Query, profile: QueryProfile) -> None:
    for field_name in query.selections:
        profile.require_filterable(field_name)
    for field_name in profile.search_fields:
        if field_name not in FIELD_NAMES:
            raise InvalidFieldError(field_name, FIELD_NAMES)


def _search_mask(dataset: Dataset, term: str, search_fields) -> np.ndarray:
    needle = term.lower()
    mask = np.zeros(len(dataset), dtype=bool)
    for field_name in search_fields:
        series = dataset.column(field_name)
        # None -> NaN after .str.lower(); na=False makes missing values non-matching
        hits = series.str.lower().str.contains(needle, regex=False, na=False)
        mask |= hits.to_numpy(dtype=bool)
    return mask


def filter_dataset(
    dataset: Dataset,
    query: Query,
    profile: QueryProfile = DEFAULT_PROFILE,
) -> Dataset:
    """
    Return the records of `dataset` matching `query`, in dataset order.

    A record is kept iff:
    - the search term is empty, or is a case-insensitive substring of at
      least one search field
    - AND for every active selection, record[field] == value exactly
    """
    _validate_query(query, profile)

    if len(dataset) == 0:
        return dataset

    mask = np.ones(len(dataset), dtype=bool)

    if query.search:
        mask &= _search_mask(dataset, query.search, profile.search_fields)

    for field_name, value in query.active_selections().items():
        mask &= dataset.column(field_name).eq(value).to_numpy(dtype=bool)

    return dataset.take(mask)


def run_query(
    dataset: Dataset,
    query: Query,
    profile: QueryProfile = DEFAULT_PROFILE,
) -> QueryResult:
    records = filter_dataset(dataset, query, profile)
    options = compute_all_filter_options(dataset, profile)

    logger.debug(
        "Query evaluated",
        extra={
            "search": query.search,
            "selections": query.active_selections(),
            "matched": len(records),
            "total": len(dataset),
        },
    )
    return QueryResult(records=records, options=options, total=len(dataset))
