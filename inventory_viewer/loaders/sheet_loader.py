from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from inventory_viewer.core.dataset import Dataset
from inventory_viewer.core.exceptions import FetchError, RecordSchemaError
from inventory_viewer.loaders.base import DatasetLoader

logger = logging.getLogger(__name__)

RETRY_STATUSES = (429, 500, 502, 503, 504)


def build_session(retries: int) -> requests.Session:
    """
    requests.Session with transparent retries on connection errors and
    throttling / gateway statuses.
    """
    session = requests.Session()
    retry = Retry(
        total=retries,
        backoff_factor=0.5,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=frozenset({"GET"}),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({"Accept": "application/json"})
    return session


class SheetLoader(DatasetLoader):
    """
    Fetches the inventory sheet as a JSON array of row objects
    (sheet.best style endpoint) and turns it into a Dataset.
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 20.0,
        retries: int = 2,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not url:
            raise ValueError("SheetLoader requires a source url")
        self.url = url
        self.timeout_seconds = timeout_seconds
        self._session = session if session is not None else build_session(retries)

    def fetch(self) -> Dataset:
        logger.info("Fetching inventory sheet", extra={"url": self.url})

        try:
            response = self._session.get(self.url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Request to {self.url} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise FetchError(f"Response from {self.url} is not valid JSON") from e

        if not isinstance(payload, list):
            raise FetchError(
                f"Expected a JSON array of rows from {self.url}, got {type(payload).__name__}"
            )

        try:
            dataset = Dataset.from_raw(
                payload,
                source=self.url,
                loaded_at=datetime.now(timezone.utc),
            )
        except RecordSchemaError as e:
            raise FetchError(f"Malformed row in response from {self.url}: {e}") from e

        logger.info(
            "Inventory sheet fetched",
            extra={"url": self.url, "n_records": len(dataset)},
        )
        return dataset
