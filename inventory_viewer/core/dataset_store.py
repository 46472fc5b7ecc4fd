from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING, Optional

from inventory_viewer.core.dataset import Dataset
from inventory_viewer.core.exceptions import FetchError

if TYPE_CHECKING:
    from inventory_viewer.loaders.base import DatasetLoader

logger = logging.getLogger(__name__)


class DatasetStore:
    """
    Owns the most recently loaded Dataset.

    - single writer: replace() swaps the held snapshot under a lock
    - readers get whole snapshots via current(), never a half-built one
    - version increments on every replace so callers know to recompute
    - last-write-wins: a load that was overtaken by a newer load is dropped
    """

    def __init__(self, loader: Optional[DatasetLoader] = None, initial: Optional[Dataset] = None):
        self._loader = loader
        self._dataset: Dataset = initial if initial is not None else Dataset()
        self._version = 0
        self._load_generation = 0
        self._applied_generation = 0
        self._lock = threading.Lock()

    def current(self) -> Dataset:
        with self._lock:
            return self._dataset

    @property
    def version(self) -> int:
        with self._lock:
            return self._version

    def replace(self, dataset: Dataset) -> int:
        """Swap in a new snapshot; returns the new version."""
        with self._lock:
            self._dataset = dataset
            self._version += 1
            # anything still in flight was started before this write
            self._applied_generation = self._load_generation
            version = self._version

        logger.info(
            "Dataset replaced",
            extra={"version": version, "n_records": len(dataset), "source": dataset.source},
        )
        return version

    def load(self) -> Dataset:
        """
        Fetch a fresh Dataset from the loader and swap it in.

        On FetchError the held snapshot is left untouched and the error
        propagates. If another load started after this one and has already
        finished, this result is discarded and the current snapshot returned.
        """
        if self._loader is None:
            raise FetchError("No loader configured for this store")

        with self._lock:
            self._load_generation += 1
            generation = self._load_generation

        started = time.perf_counter()
        try:
            dataset = self._loader.fetch()
        except FetchError as e:
            logger.error(
                "Dataset fetch failed; keeping previous snapshot",
                extra={"generation": generation, "version": self.version, "error": str(e)},
            )
            raise

        elapsed = time.perf_counter() - started

        with self._lock:
            if generation <= self._applied_generation:
                logger.info(
                    "Dropping stale load result",
                    extra={"generation": generation, "latest_generation": self._load_generation},
                )
                return self._dataset
            self._dataset = dataset
            self._version += 1
            self._applied_generation = generation
            version = self._version

        logger.info(
            "Dataset loaded",
            extra={
                "version": version,
                "n_records": len(dataset),
                "source": dataset.source,
                "elapsed_s": round(elapsed, 3),
            },
        )
        return dataset
