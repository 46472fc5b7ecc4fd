import dash
import dash_bootstrap_components as dbc
from dash import dash_table, html

from inventory_viewer.config.model import GlobalConfig, SourceConfig
from inventory_viewer.core.dataset import Dataset
from inventory_viewer.core.dataset_store import DatasetStore
from inventory_viewer.core.exceptions import FetchError
from inventory_viewer.loaders.base import DatasetLoader
from inventory_viewer.ui.callbacks.callbacks_data import reload_dataset
from inventory_viewer.ui.callbacks.callbacks_filters import cleared_controls
from inventory_viewer.ui.callbacks.callbacks_table import render_query
from inventory_viewer.ui.config import AppConfig
from inventory_viewer.ui.helpers import NO_PRODUCTS_TEXT
from inventory_viewer.ui.ids import filter_select_id

FIRST = [
    {"BARCODE": "001", "NAMA PRODUK": "Kopi Hitam", "DIVISI": "Makanan", "KATEGORI": "Kopi", "SUPPLIER": "PT Kapal"},
    {"BARCODE": "002", "NAMA PRODUK": "Teh Hijau", "DIVISI": "Minuman", "KATEGORI": "Teh", "SUPPLIER": "PT Daun"},
]
SECOND = [
    {"BARCODE": "003", "NAMA PRODUK": "Air Mineral", "DIVISI": "Minuman", "KATEGORI": "Air", "SUPPLIER": "PT Sumber"},
]

IDS = [filter_select_id("DIVISI"), filter_select_id("KATEGORI"), filter_select_id("SUPPLIER")]


class _QueuedLoader(DatasetLoader):
    def __init__(self, *outcomes):
        self._outcomes = list(outcomes)

    def fetch(self) -> Dataset:
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return Dataset.from_raw(outcome, source="queued")


def _make_ctx(*outcomes) -> AppConfig:
    store = DatasetStore(_QueuedLoader(*outcomes))
    return AppConfig(
        config_root=".",
        global_config=GlobalConfig(source=SourceConfig("https://sheets.example/abc")),
        store=store,
    )


def _option_values(options):
    return [[o["value"] for o in per_field] for per_field in options]


def test_reload_bumps_version_and_clears_banner():
    ctx = _make_ctx(FIRST, SECOND)
    ctx.store.load()

    version, status = reload_dataset(ctx)

    assert version == 2
    assert status is None
    assert [r.barcode for r in ctx.store.current()] == ["003"]


def test_reload_failure_keeps_snapshot_and_shows_banner():
    ctx = _make_ctx(FIRST, FetchError("sheet down"))
    ctx.store.load()
    before = ctx.store.current()

    version, status = reload_dataset(ctx)

    assert version is dash.no_update
    assert isinstance(status, dbc.Alert)
    assert status.children == "Failed to fetch products"
    assert ctx.store.current() is before


def test_render_query_filters_and_counts():
    ctx = _make_ctx(FIRST)
    ctx.store.load()

    table, count, options = render_query(
        ctx, {"search": "kopi", "selections": {"DIVISI": None}}, IDS
    )

    assert isinstance(table, dash_table.DataTable)
    assert [row["BARCODE"] for row in table.data] == ["001"]
    assert count == "Showing 1 of 2 products"
    assert _option_values(options) == [["Makanan", "Minuman"], ["Kopi", "Teh"], ["PT Daun", "PT Kapal"]]


def test_render_query_after_refresh_has_fresh_options():
    ctx = _make_ctx(FIRST, SECOND)
    ctx.store.load()
    render_query(ctx, None, IDS)

    reload_dataset(ctx)
    table, count, options = render_query(ctx, {"search": "", "selections": {"DIVISI": "Makanan"}}, IDS)

    assert isinstance(table, html.Div)
    assert table.children == NO_PRODUCTS_TEXT
    assert count == "Showing 0 of 1 products"
    assert _option_values(options) == [["Minuman"], ["Air"], ["PT Sumber"]]


def test_cleared_controls_resets_search_and_every_dropdown():
    search, values = cleared_controls(
        {"search": "kopi", "selections": {"DIVISI": "Minuman", "SUPPLIER": "PT Daun"}}, IDS
    )

    assert search == ""
    assert values == [None, None, None]


def test_cleared_controls_without_stored_query():
    assert cleared_controls(None, IDS) == ("", [None, None, None])
