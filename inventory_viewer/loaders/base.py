from __future__ import annotations

from abc import ABC, abstractmethod

from inventory_viewer.core.dataset import Dataset


class DatasetLoader(ABC):
    """
    Source of inventory snapshots for the DatasetStore.
    """

    @abstractmethod
    def fetch(self) -> Dataset:
        """
        Return a fully materialised Dataset.
        Raises FetchError if no dataset could be produced.
        """
        raise NotImplementedError
