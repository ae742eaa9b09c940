import math
from datetime import date, datetime, timezone

from okazje.table.collation import polish_collator
from okazje.table.values import ABSENT, Instant, Number, Other, Text, classify, compare_values


def test_classify_variants():
    assert classify(None) is ABSENT
    assert classify(3) == Number(3.0)
    assert classify("Ekspres") == Text("Ekspres")
    assert isinstance(classify(True), Other)
    assert isinstance(classify(math.nan), Other)
    assert isinstance(classify(["a"]), Other)


def test_iso_strings_become_instants_and_keep_raw_text():
    value = classify("2024-03-01T12:00:00Z")
    assert isinstance(value, Instant)
    assert value.raw == "2024-03-01T12:00:00Z"
    assert value.value == datetime(2024, 3, 1, 12, tzinfo=timezone.utc)


def test_non_iso_strings_stay_text():
    assert classify("1 maja") == Text("1 maja")
    assert classify("2024") == Text("2024")


def test_dates_and_datetimes_become_instants():
    assert isinstance(classify(date(2024, 1, 1)), Instant)
    assert isinstance(classify(datetime(2024, 1, 1)), Instant)


def test_absent_is_last_regardless_of_direction():
    assert compare_values(ABSENT, Number(1), polish_collator) > 0
    assert compare_values(ABSENT, Number(1), polish_collator, descending=True) > 0
    assert compare_values(Number(1), ABSENT, polish_collator, descending=True) < 0
    assert compare_values(ABSENT, ABSENT, polish_collator) == 0


def test_string_that_is_not_a_date_compares_as_text_with_a_date_string():
    date_like = classify("2024-01-01")
    word = classify("abc")
    assert compare_values(date_like, word, polish_collator) < 0


def test_datetime_object_against_text_is_unordered():
    assert compare_values(classify(datetime(2024, 1, 1)), Text("abc"), polish_collator) == 0


def test_unusable_timestamp_mappings_are_other():
    for stamp in ({"seconds": 1e20}, {"seconds": float("nan")}, {"seconds": 5, "nanoseconds": "x"}):
        assert isinstance(classify(stamp), Other)


def test_large_integers_compare_exactly():
    big = 2 ** 53
    assert compare_values(classify(big + 1), classify(big), polish_collator) > 0
    assert compare_values(classify(big), classify(big + 1), polish_collator) < 0
