"""Country Store: record store adapter over the countries table.

Invariants:
    - Sole owner of reads/writes against countries
    - Records in and out are plain dicts keyed by column name
    - Empty or missing ids never reach the database: get() returns None
    - scan(search) keeps records whose name/region/subregion contains the text,
      case-insensitive (Unicode), literal substring
    - put_many() is all-or-nothing: one commit for the whole batch. This departs
      from a per-item batch write where each put succeeds or fails on its own;
      a failing item rolls back every item in the batch

Design Decisions:
    - put() uses session.merge(): upsert semantics without dialect-specific SQL
    - get_many() is one IN query: neighbor listings need N records, not N round trips
    - Search matching runs in Python, not SQL: lower() folds ASCII only on SQLite
      and under C collation on Postgres
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from countries_api.core.domain_types import CountryId
from countries_api.core.listing import matches_search, normalize_search
from countries_api.models.country import Country

logger = logging.getLogger(__name__)


class SqlCountryStore:
    """CountryStore implementation backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, country_id: CountryId) -> dict | None:
        if not country_id:
            return None
        country = await self.db.get(Country, country_id)
        return country.to_dict() if country else None

    async def get_many(self, country_ids: list[CountryId]) -> dict[str, dict]:
        """Fetch several records at once, keyed by id. Missing ids are absent from the result."""
        ids = [cid for cid in country_ids if cid]
        if not ids:
            return {}
        result = await self.db.execute(
            select(Country).where(Country.id.in_(ids)),
        )
        return {c.id: c.to_dict() for c in result.scalars().all()}

    async def put(self, record: dict) -> dict:
        country = await self.db.merge(Country(**record))
        await self.db.commit()
        return country.to_dict()

    async def put_many(self, records: list[dict]) -> list[dict]:
        countries = [Country(**record) for record in records]
        self.db.add_all(countries)
        await self.db.commit()
        logger.info(
            f"Batch wrote {len(countries)} countries",
            extra={"count": len(countries), "operation": "batch_write"},
        )
        return [c.to_dict() for c in countries]

    async def delete(self, country_id: CountryId) -> None:
        country = await self.db.get(Country, country_id)
        if country is None:
            return
        await self.db.delete(country)
        await self.db.commit()

    async def scan(self, search: str | None = None) -> list[dict]:
        """All records, optionally filtered by a case-insensitive literal substring."""
        result = await self.db.execute(select(Country))
        records = [c.to_dict() for c in result.scalars().all()]
        needle = normalize_search(search)
        if needle:
            records = [r for r in records if matches_search(r, needle)]
        return records

    async def scan_ids(self) -> set[str]:
        """Projection scan: identifiers only."""
        result = await self.db.execute(select(Country.id))
        return set(result.scalars().all())
