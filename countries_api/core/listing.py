"""Listing Core: pure functions for paging, search matching, and in-memory sort.

Invariants:
    - page and limit are positive integers; anything else raises InvalidInputError
    - total counts the filtered set (post-search, pre-pagination)
    - pages = ceil(total / limit); has_prev = page > 1; has_next = page < pages
    - Sort is stable: ties keep store order

Design Decisions:
    - Pure functions, no IO: the listing service does the scan, these do the math
    - matches_search is the single definition of a search hit; the store applies it
"""

import math
from typing import Any, Iterable, Mapping, Sequence

from countries_api.core.domain_types import SortOption
from countries_api.core.errors import InvalidInputError

SEARCH_FIELDS: tuple[str, ...] = ("name", "region", "subregion")


def parse_positive_int(value: Any, name: str, default: int) -> int:
    """Parse a positive integer query value. None means default; nothing is coerced."""
    if value is None:
        return default
    if isinstance(value, bool):
        parsed = None
    elif isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.strip().isdecimal():
        # isdecimal rejects superscripts; int() still refuses oversized digit runs
        try:
            parsed = int(value.strip())
        except ValueError:
            parsed = None
    else:
        parsed = None
    if parsed is None or parsed < 1:
        raise InvalidInputError(
            f"Invalid query parameter '{name}'",
            details=[{
                "field": name,
                "message": "must be a positive integer",
                "type": "positive_int",
                "value": str(value),
            }],
        )
    return parsed


def normalize_search(search: str | None) -> str:
    return (search or "").strip()


def matches_search(record: Mapping[str, Any], search: str) -> bool:
    """Case-insensitive literal substring match on name, region, or subregion."""
    needle = normalize_search(search).lower()
    if not needle:
        return True
    return any(
        needle in str(record.get(f) or "").lower() for f in SEARCH_FIELDS
    )


def sort_records(
    records: Iterable[Mapping[str, Any]], sort_option: SortOption,
) -> list:
    """Stable in-memory sort by the option's field and direction.

    Records missing the sort field go last regardless of direction.
    """
    key = sort_option.field
    records = list(records)
    present = [r for r in records if r.get(key) is not None]
    missing = [r for r in records if r.get(key) is None]
    ordered = sorted(
        present, key=lambda r: r[key], reverse=sort_option.descending,
    )
    return ordered + missing


def paginate(records: Sequence, page: int, limit: int) -> dict:
    """Slice a sorted sequence into a page envelope."""
    total = len(records)
    pages = math.ceil(total / limit)
    start = (page - 1) * limit
    return {
        "list": list(records[start:start + limit]),
        "has_next": page < pages,
        "has_prev": page > 1,
        "page": page,
        "pages": pages,
        "per_page": limit,
        "total": total,
    }
