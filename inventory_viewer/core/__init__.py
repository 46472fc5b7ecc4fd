"""
Core domain layer: product records, the immutable dataset, the dataset
store, query value objects and the stateless query engine
"""

from .dataset import Dataset
from .dataset_store import DatasetStore
from .query import Query, QueryProfile
from .query_engine import QueryResult, compute_filter_options, filter_dataset, run_query
from .record import ProductRecord

__all__ = [
    "Dataset",
    "DatasetStore",
    "ProductRecord",
    "Query",
    "QueryProfile",
    "QueryResult",
    "compute_filter_options",
    "filter_dataset",
    "run_query",
]
