import asyncio
from datetime import datetime, timezone

from okazje.utils import calculate_discount, call_threadsafe, convert_to_pln, to_datetime, to_iso


def test_convert_to_pln_uses_fixed_rates():
    assert convert_to_pln(10, "USD") == 40.0
    assert convert_to_pln(10, "eur") == 43.0
    assert convert_to_pln(19.99, "USD") == 79.96
    assert convert_to_pln(100, "CNY") == 55.0


def test_unknown_currency_keeps_amount():
    assert convert_to_pln(12.5, "JPY") == 12.5


def test_calculate_discount():
    assert calculate_discount(200, 150) == 25
    assert calculate_discount(8, 7) == 13  # 12.5 rounds half up
    assert calculate_discount(None, 10) == 0
    assert calculate_discount(100, 120) == 0
    assert calculate_discount(100, 100) == 0


def test_epoch_seconds_and_milliseconds():
    assert to_datetime(1_700_000_000) == datetime.fromtimestamp(1_700_000_000, tz=timezone.utc)
    assert to_datetime(1_700_000_000_000) == datetime.fromtimestamp(1_700_000_000, tz=timezone.utc)


def test_firestore_timestamp_shapes():
    assert to_iso({"seconds": 0, "nanoseconds": 0}) == "1970-01-01T00:00:00Z"
    assert to_iso({"_seconds": 86400}) == "1970-01-02T00:00:00Z"


def test_naive_values_are_utc():
    assert to_iso("2024-05-01T08:00:00") == "2024-05-01T08:00:00Z"
    assert to_iso(datetime(2024, 5, 1, 8)) == "2024-05-01T08:00:00Z"


def test_unsupported_values():
    assert to_datetime(None) is None
    assert to_datetime(True) is None
    assert to_datetime("wczoraj") is None
    assert to_iso({"foo": 1}) is None


def test_call_threadsafe_drops_none_kwargs():
    def f(a, b=2):
        return a + b

    assert asyncio.run(call_threadsafe(f, 1, b=None)) == 3
    assert asyncio.run(call_threadsafe(f, 1, b=5)) == 6


def test_out_of_range_and_malformed_timestamps_are_none():
    assert to_datetime(1e20) is None
    assert to_datetime(float("nan")) is None
    assert to_datetime(10 ** 400) is None
    assert to_datetime({"seconds": 1e20}) is None
    assert to_datetime({"seconds": 5, "nanoseconds": "x"}) is None
