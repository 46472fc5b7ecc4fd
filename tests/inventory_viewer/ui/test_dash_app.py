import json
from pathlib import Path

from inventory_viewer.config.loader import SOURCE_URL_ENV, load_global_config
from inventory_viewer.core.dataset import Dataset
from inventory_viewer.core.dataset_store import DatasetStore
from inventory_viewer.core.exceptions import FetchError
from inventory_viewer.loaders.base import DatasetLoader
from inventory_viewer.ui.config import AppConfig
from inventory_viewer.ui.dash_app import create_dash_app
from inventory_viewer.ui.ids import IDs
from inventory_viewer.ui.layout.build_layout import build_layout


class _StaticLoader(DatasetLoader):
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = 0

    def fetch(self) -> Dataset:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return Dataset.from_raw(self.rows, source="static")


ROWS = [
    {"BARCODE": "001", "NAMA PRODUK": "Kopi Hitam", "DIVISI": "Makanan", "SUPPLIER": "PT Kapal"},
    {"BARCODE": "002", "NAMA PRODUK": "Teh Hijau", "DIVISI": "Minuman", "SUPPLIER": "PT Daun"},
]


def _write_config(root: Path) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / "global.json").write_text(
        json.dumps({"ui_title": "Test Inventory", "source": {"url": "https://sheets.example/abc"}})
    )
    return root


def _walk(component):
    yield component
    children = getattr(component, "children", None)
    if children is None:
        return
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        if hasattr(child, "to_plotly_json"):
            yield from _walk(child)


def _find(layout, component_id):
    return next((c for c in _walk(layout) if getattr(c, "id", None) == component_id), None)


def test_create_dash_app_fetches_once_and_sets_title(tmp_path, monkeypatch):
    monkeypatch.delenv(SOURCE_URL_ENV, raising=False)
    loader = _StaticLoader(ROWS)

    app = create_dash_app(_write_config(tmp_path / "config"), loader=loader)

    assert loader.calls == 1
    assert app.title == "Test Inventory"


def test_create_dash_app_starts_when_fetch_fails(tmp_path, monkeypatch):
    monkeypatch.delenv(SOURCE_URL_ENV, raising=False)
    loader = _StaticLoader(error=FetchError("down"))

    app = create_dash_app(_write_config(tmp_path / "config"), loader=loader)

    status = _find(app.layout, IDs.Control.FETCH_STATUS)
    assert status is not None
    assert status.children is not None


def test_layout_seeds_dropdowns_and_count_from_store(tmp_path, monkeypatch):
    monkeypatch.delenv(SOURCE_URL_ENV, raising=False)
    cfg = load_global_config(_write_config(tmp_path / "config"))
    store = DatasetStore(_StaticLoader(ROWS))
    store.load()

    layout = build_layout(AppConfig(config_root=tmp_path, global_config=cfg, store=store))

    divisi = _find(layout, {"type": IDs.Pattern.FILTER_SELECT, "field": "DIVISI"})
    assert [o["value"] for o in divisi.options] == ["Makanan", "Minuman"]
    assert divisi.placeholder == "All Divisi"

    count = _find(layout, IDs.Control.RESULT_COUNT)
    assert count.children == "Showing 2 of 2 products"

    version = _find(layout, IDs.Store.DATASET_VERSION)
    assert version.data == 1

    query = _find(layout, IDs.Store.QUERY)
    assert query.data == {"search": "", "selections": {"DIVISI": None, "KATEGORI": None, "SUPPLIER": None}}
