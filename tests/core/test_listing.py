"""Listing core tests: page parsing, search matching, stable sort, page envelope.

Tests cover:
    - Positive ints and digit strings accepted; None uses the default
    - Zero, negatives, floats, junk strings, and bools rejected (never coerced)
    - Case-insensitive literal substring over name/region/subregion
    - Every sort option orders by its field and direction
    - Ties keep input order (stable)
    - Envelope math: 25 items/limit 10 -> 3 pages; page 2 has next and prev
    - Empty set: total 0, pages 0, no next/prev

Design Decisions:
    - Pure core functions: no fixtures, records built inline
"""

import pytest

from countries_api.core.domain_types import SortOption
from countries_api.core.errors import InvalidInputError
from countries_api.core.listing import (
    matches_search, paginate, parse_positive_int, sort_records,
)


def _record(name: str, population: int = 0, area: float = 0.0, **extra) -> dict:
    return {
        "name": name,
        "population": population,
        "area": area,
        "region": extra.get("region", "Europe"),
        "subregion": extra.get("subregion", "Western Europe"),
    }


# --- parse_positive_int -------------------------------------------------------

def test_parse_positive_int_defaults_when_missing():
    assert parse_positive_int(None, "page", 1) == 1
    assert parse_positive_int(None, "limit", 10) == 10


def test_parse_positive_int_accepts_int_and_digit_string():
    assert parse_positive_int(3, "page", 1) == 3
    assert parse_positive_int("25", "limit", 10) == 25
    assert parse_positive_int(" 7 ", "limit", 10) == 7


@pytest.mark.parametrize(
    "bad", ["0", 0, -1, "-1", "abc", "2.5", 2.5, "", True, "²", "1_000", "9" * 5000],
)
def test_parse_positive_int_rejects_invalid_values(bad):
    with pytest.raises(InvalidInputError) as exc_info:
        parse_positive_int(bad, "page", 1)
    assert exc_info.value.http_status == 400
    assert exc_info.value.details[0]["field"] == "page"


# --- matches_search -----------------------------------------------------------

def test_matches_search_is_case_insensitive_on_name():
    assert matches_search(_record("Germany"), "GERM")


def test_matches_search_checks_region_and_subregion():
    record = _record("Chile", region="Americas", subregion="South America")
    assert matches_search(record, "americas")
    assert matches_search(record, "south")


def test_matches_search_is_literal_substring_not_pattern():
    assert not matches_search(_record("Germany"), "G.rmany")
    assert not matches_search(_record("Germany"), "%")


def test_matches_search_empty_text_matches_everything():
    assert matches_search(_record("Peru"), "   ")


# --- sort_records -------------------------------------------------------------

def test_a_to_z_sorts_by_name_ascending():
    records = [_record("Chad"), _record("Angola"), _record("Benin")]
    result = sort_records(records, SortOption.A_TO_Z)
    assert [r["name"] for r in result] == ["Angola", "Benin", "Chad"]


def test_z_to_a_sorts_by_name_descending():
    records = [_record("Chad"), _record("Angola"), _record("Benin")]
    result = sort_records(records, SortOption.Z_TO_A)
    assert [r["name"] for r in result] == ["Chad", "Benin", "Angola"]


def test_population_high_to_low_is_non_increasing():
    records = [_record(f"C{i}", population=p) for i, p in enumerate([5, 90, 12, 90, 0])]
    result = sort_records(records, SortOption.POPULATION_HIGH_TO_LOW)
    populations = [r["population"] for r in result]
    assert all(a >= b for a, b in zip(populations, populations[1:]))


def test_area_low_to_high_is_non_decreasing():
    records = [_record(f"C{i}", area=a) for i, a in enumerate([3.5, 1.0, 2.25])]
    result = sort_records(records, SortOption.AREA_LOW_TO_HIGH)
    assert [r["area"] for r in result] == [1.0, 2.25, 3.5]


def test_sort_is_stable_for_ties_in_both_directions():
    records = [_record("First", population=10), _record("Second", population=10)]
    asc = sort_records(records, SortOption.POPULATION_LOW_TO_HIGH)
    desc = sort_records(records, SortOption.POPULATION_HIGH_TO_LOW)
    assert [r["name"] for r in asc] == ["First", "Second"]
    assert [r["name"] for r in desc] == ["First", "Second"]


def test_records_missing_sort_field_go_last():
    records = [{"name": "NoArea", "area": None}, _record("Tiny", area=1.0)]
    result = sort_records(records, SortOption.AREA_HIGH_TO_LOW)
    assert [r["name"] for r in result] == ["Tiny", "NoArea"]


# --- paginate -----------------------------------------------------------------

def test_second_page_of_twenty_five():
    records = list(range(25))
    envelope = paginate(records, page=2, limit=10)
    assert envelope["list"] == list(range(10, 20))
    assert envelope["has_next"] is True
    assert envelope["has_prev"] is True
    assert envelope["pages"] == 3
    assert envelope["total"] == 25
    assert envelope["per_page"] == 10
    assert envelope["page"] == 2


def test_last_page_is_partial_and_has_no_next():
    envelope = paginate(list(range(25)), page=3, limit=10)
    assert envelope["list"] == [20, 21, 22, 23, 24]
    assert envelope["has_next"] is False


def test_page_past_the_end_is_empty():
    envelope = paginate(list(range(5)), page=4, limit=10)
    assert envelope["list"] == []
    assert envelope["has_prev"] is True
    assert envelope["has_next"] is False


def test_empty_set_envelope():
    envelope = paginate([], page=1, limit=10)
    assert envelope == {
        "list": [],
        "has_next": False,
        "has_prev": False,
        "page": 1,
        "pages": 0,
        "per_page": 10,
        "total": 0,
    }
