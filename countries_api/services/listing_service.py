"""Listing Service: paginated, sorted, searched country listings.

Invariants:
    - page/limit validated strictly before any store access
    - Search hits are defined by matches_search, re-applied here whatever the store did
    - total/pages computed on the filtered set, before slicing

Design Decisions:
    - Full scan + in-memory sort: the store has no ORDER BY/OFFSET contract to
      rely on. Fine for a few hundred countries, a scalability boundary beyond that
"""

from typing import Any

from countries_api.core.domain_types import SortOption
from countries_api.core.listing import (
    matches_search, normalize_search, paginate, parse_positive_int, sort_records,
)
from countries_api.core.repository_protocols import CountryStore


class ListingService:
    """Paginated listing over CountryStore."""

    def __init__(self, countries: CountryStore, default_page_size: int = 10):
        self.countries = countries
        self.default_page_size = default_page_size

    async def list_paginated(
        self,
        page: Any = None,
        limit: Any = None,
        sort_by: str | None = None,
        search: str | None = None,
    ) -> dict:
        page_number = parse_positive_int(page, "page", 1)
        page_size = parse_positive_int(limit, "limit", self.default_page_size)
        sort_option = SortOption.resolve(sort_by)
        needle = normalize_search(search)

        records = await self.countries.scan(needle or None)
        if needle:
            records = [r for r in records if matches_search(r, needle)]

        return paginate(sort_records(records, sort_option), page_number, page_size)
