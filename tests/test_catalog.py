import asyncio
import json

import pytest

from okazje.catalog import CatalogCache, CatalogSnapshot, load_catalog_file, normalize_record
from okazje.errors import CatalogError


def _write(tmp_path, doc):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    return str(path)


def test_deal_prices_are_converted_and_discount_computed():
    deal = normalize_record("deals", {"title": "Dron", "price": 50, "originalPrice": 100, "currency": "USD"})
    assert deal["price"] == 200.0
    assert deal["originalPrice"] == 400.0
    assert deal["currency"] == "PLN"
    assert deal["discountPercent"] == 50


def test_pln_deals_keep_prices():
    deal = normalize_record("deals", {"price": 99.99, "currency": "PLN"})
    assert deal["price"] == 99.99
    assert deal["discountPercent"] == 0


def test_timestamps_become_iso_strings():
    deal = normalize_record("deals", {"postedAt": {"seconds": 0}, "price": 1})
    assert deal["postedAt"] == "1970-01-01T00:00:00Z"


def test_normalize_does_not_touch_input():
    raw = {"price": 1, "currency": "EUR"}
    normalize_record("products", raw)
    assert raw == {"price": 1, "currency": "EUR"}


def test_load_catalog_file(tmp_path):
    path = _write(tmp_path, {
        "deals": [{"title": "A", "price": 10}],
        "products": [{"name": "P"}],
    })
    tables = load_catalog_file(path)
    assert tables["deals"][0]["discountPercent"] == 0
    assert tables["products"] == [{"name": "P"}]
    assert tables["users"] == []


def test_missing_catalog_file_yields_empty_tables(tmp_path):
    tables = load_catalog_file(str(tmp_path / "nope.json"))
    assert tables == {"deals": [], "products": [], "users": []}


def test_malformed_catalog_raises(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog_file(str(path))


def test_catalog_tables_must_be_lists(tmp_path):
    with pytest.raises(CatalogError):
        load_catalog_file(_write(tmp_path, {"deals": {"a": 1}}))


def test_snapshot_table_lookup():
    snap = CatalogSnapshot(ts=1.0, deals=[{"id": 1}])
    assert snap.table("deals") == [{"id": 1}]
    with pytest.raises(KeyError):
        snap.table("comments")


def test_refresh_once_publishes_snapshot():
    cache = CatalogCache(interval_seconds=60)
    cache.wire_loader(lambda: {"deals": [{"id": "d1"}], "users": [{"uid": "u1"}]})
    assert not cache.has_data()

    snap = asyncio.run(cache.refresh_once())

    assert cache.snapshot() is snap
    assert cache.has_data()
    assert snap.deals == [{"id": "d1"}]
    assert snap.products == []


def test_failed_refresh_keeps_previous_snapshot():
    calls = []

    def loader():
        calls.append(1)
        if len(calls) > 1:
            raise CatalogError("broken")
        return {"deals": [{"id": "d1"}]}

    async def scenario():
        cache = CatalogCache(interval_seconds=60)
        cache.wire_loader(loader)
        await cache.refresh_once()
        with pytest.raises(CatalogError):
            await cache.refresh_once()
        return cache

    cache = asyncio.run(scenario())
    assert cache.snapshot().deals == [{"id": "d1"}]


def test_background_refresher_starts_and_stops():
    async def scenario():
        cache = CatalogCache(interval_seconds=60)
        cache.wire_loader(lambda: {"products": [{"name": "P"}]})
        await cache.start()
        for _ in range(100):
            if cache.has_data():
                break
            await asyncio.sleep(0.01)
        await cache.stop()
        return cache

    cache = asyncio.run(scenario())
    assert cache.snapshot().products == [{"name": "P"}]


def test_unrecognised_timestamp_values_are_kept():
    deal = normalize_record("deals", {"postedAt": True, "createdAt": {"foo": 1}, "price": 1})
    assert deal["postedAt"] is True
    assert deal["createdAt"] == {"foo": 1}


def test_out_of_range_timestamps_are_kept(tmp_path):
    deal = normalize_record("deals", {"postedAt": 1e20, "updatedAt": {"seconds": 1e20}, "price": 1})
    assert deal["postedAt"] == 1e20
    assert deal["updatedAt"] == {"seconds": 1e20}

    tables = load_catalog_file(_write(tmp_path, {"deals": [{"postedAt": 1e20, "price": 1}]}))
    assert tables["deals"][0]["postedAt"] == 1e20
