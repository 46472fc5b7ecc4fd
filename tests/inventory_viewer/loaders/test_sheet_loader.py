import json

import pytest
import requests

from inventory_viewer.core.exceptions import FetchError
from inventory_viewer.loaders.sheet_loader import SheetLoader, build_session

URL = "https://sheets.example/inventory"


class _FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class _FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, timeout=None):
        self.requests.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


def test_fetch_builds_dataset_from_rows():
    rows = [
        {"BARCODE": "001", "NAMA PRODUK": "Kopi Hitam", "DIVISI": "Makanan", "EXTRA": "x"},
        {"BARCODE": "002", "NAMA PRODUK": "Teh Hijau", "DIVISI": "Minuman"},
    ]
    session = _FakeSession(_FakeResponse(payload=rows))
    loader = SheetLoader(URL, timeout_seconds=5, session=session)

    ds = loader.fetch()

    assert session.requests == [(URL, 5)]
    assert [r.barcode for r in ds] == ["001", "002"]
    assert ds.source == URL
    assert ds.loaded_at is not None


def test_fetch_accepts_empty_sheet():
    loader = SheetLoader(URL, session=_FakeSession(_FakeResponse(payload=[])))

    assert len(loader.fetch()) == 0


def test_network_error_becomes_fetch_error():
    session = _FakeSession(error=requests.ConnectionError("unreachable"))
    loader = SheetLoader(URL, session=session)

    with pytest.raises(FetchError) as exc:
        loader.fetch()

    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_http_error_status_becomes_fetch_error():
    loader = SheetLoader(URL, session=_FakeSession(_FakeResponse(status_code=503)))

    with pytest.raises(FetchError):
        loader.fetch()


def test_invalid_json_becomes_fetch_error():
    loader = SheetLoader(URL, session=_FakeSession(_FakeResponse(text="<html>nope</html>")))

    with pytest.raises(FetchError, match="not valid JSON"):
        loader.fetch()


def test_non_list_payload_becomes_fetch_error():
    loader = SheetLoader(URL, session=_FakeSession(_FakeResponse(payload={"detail": "quota"})))

    with pytest.raises(FetchError, match="JSON array"):
        loader.fetch()


def test_malformed_row_becomes_fetch_error():
    loader = SheetLoader(URL, session=_FakeSession(_FakeResponse(payload=[{"BARCODE": "1"}, 42])))

    with pytest.raises(FetchError, match="Malformed row"):
        loader.fetch()


def test_loader_requires_url():
    with pytest.raises(ValueError):
        SheetLoader("")


def test_build_session_mounts_retrying_adapters():
    session = build_session(retries=3)

    adapter = session.get_adapter("https://example.com")

    assert adapter.max_retries.total == 3
    assert 503 in adapter.max_retries.status_forcelist
    assert session.headers["Accept"] == "application/json"
