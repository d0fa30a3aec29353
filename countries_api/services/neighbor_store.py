"""Neighbor Store: relation store adapter over the country_neighbors table.

Invariants:
    - Sole owner of reads/writes against country_neighbors
    - insert_if_absent is a single atomic statement: two concurrent calls for the
      same pair can never both return True
    - query() returns neighbor ids in insertion order (seq)
    - No referential checks here; callers validate ids against CountryStore

Design Decisions:
    - INSERT ... ON CONFLICT DO NOTHING on the pair's unique constraint over
      read-then-write: closes the duplicate-insert race without locks
    - RETURNING seq decides "created" (no row back = conflict); rowcount is not
      reliable across drivers for ON CONFLICT statements
    - Savepoint + IntegrityError fallback for dialects without ON CONFLICT
"""

import logging

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from countries_api.core.domain_types import CountryId
from countries_api.models.country_neighbor import CountryNeighbor

logger = logging.getLogger(__name__)

_ON_CONFLICT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlNeighborStore:
    """NeighborStore implementation backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(
        self, country_id: CountryId, neighbor_id: CountryId,
    ) -> dict | None:
        result = await self.db.execute(
            select(CountryNeighbor)
            .where(CountryNeighbor.country_id == country_id)
            .where(CountryNeighbor.neighbor_id == neighbor_id),
        )
        pair = result.scalar_one_or_none()
        return pair.to_dict() if pair else None

    async def insert_if_absent(
        self, country_id: CountryId, neighbor_id: CountryId,
    ) -> bool:
        """Insert the pair unless it exists. True iff this call created it."""
        dialect = self.db.get_bind().dialect.name
        insert = _ON_CONFLICT_INSERTS.get(dialect)
        if insert is None:
            return await self._insert_with_savepoint(country_id, neighbor_id)

        stmt = (
            insert(CountryNeighbor)
            .values(country_id=country_id, neighbor_id=neighbor_id)
            .on_conflict_do_nothing(index_elements=["country_id", "neighbor_id"])
            .returning(CountryNeighbor.seq)
        )
        result = await self.db.execute(stmt)
        created = result.scalar_one_or_none() is not None
        await self.db.commit()
        return created

    async def _insert_with_savepoint(
        self, country_id: CountryId, neighbor_id: CountryId,
    ) -> bool:
        try:
            async with self.db.begin_nested():
                self.db.add(CountryNeighbor(
                    country_id=country_id, neighbor_id=neighbor_id,
                ))
        except IntegrityError:
            logger.info(
                "Neighbor pair already present",
                extra={"country_id": country_id, "neighbor_id": neighbor_id},
            )
            return False
        await self.db.commit()
        return True

    async def query(self, country_id: CountryId) -> list[str]:
        result = await self.db.execute(
            select(CountryNeighbor.neighbor_id)
            .where(CountryNeighbor.country_id == country_id)
            .order_by(CountryNeighbor.seq),
        )
        return list(result.scalars().all())
