"""Neighbor Service: validated additions to the neighbor relation and denormalized lookups.

Invariants:
    - The owning country must exist, else ResourceNotFoundError (whole call fails)
    - Each candidate id must be a member of the country collection at insert time
    - A pair is stored at most once; repeats are reported per item, never raised
    - Candidates are processed in input order; errors keep that order
    - Relation is directed: add_neighbors(A, [B]) never writes B->A
    - get_neighbors output order = relation query order (insertion order)
    - Orphaned pairs (neighbor record deleted later) are omitted and logged

Design Decisions:
    - One id-only scan per call for membership: O(collection) but a single round
      trip, and validation sees one consistent snapshot of the collection
    - Existence check before insert_if_absent keeps the common duplicate case a
      read; insert_if_absent still decides under concurrency
    - Neighbor records fetched with one get_many and re-ordered by id position
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from countries_api.core.domain_types import CountryId, NEIGHBOR_FIELDS
from countries_api.core.errors import ResourceNotFoundError
from countries_api.core.repository_protocols import CountryStore, NeighborStore

logger = logging.getLogger(__name__)


def invalid_neighbor_message(neighbor_id: str) -> str:
    return f"Invalid neighbor country ID: {neighbor_id}"


def duplicate_neighbor_message(neighbor_id: str) -> str:
    return f"Neighbor with ID {neighbor_id} already exists for this country"


def project_neighbor(record: dict) -> dict:
    """Public subset of a country record used in neighbor listings."""
    return {f: record.get(f) for f in NEIGHBOR_FIELDS}


@dataclass
class NeighborAdditionResult:
    """Outcome of add_neighbors: partial success is a normal result."""
    added: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return bool(self.added)


class NeighborService:
    """Neighbor management over CountryStore and NeighborStore."""

    def __init__(self, countries: CountryStore, neighbors: NeighborStore):
        self.countries = countries
        self.neighbors = neighbors

    async def _require_country(self, country_id: CountryId) -> dict:
        country = await self.countries.get(country_id)
        if country is None:
            raise ResourceNotFoundError("Country", str(country_id))
        return country

    async def add_neighbors(
        self, country_id: CountryId, neighbor_ids: Iterable[str],
    ) -> NeighborAdditionResult:
        await self._require_country(country_id)
        valid_ids = await self.countries.scan_ids()

        result = NeighborAdditionResult()
        for neighbor_id in neighbor_ids:
            if neighbor_id not in valid_ids:
                result.errors.append(invalid_neighbor_message(neighbor_id))
                continue

            if await self.neighbors.get(country_id, neighbor_id) is not None:
                result.errors.append(duplicate_neighbor_message(neighbor_id))
                continue

            if not await self.neighbors.insert_if_absent(country_id, neighbor_id):
                # Lost a race with a concurrent addition of the same pair
                result.errors.append(duplicate_neighbor_message(neighbor_id))
                continue

            result.added.append(neighbor_id)

        logger.info(
            f"Neighbor addition: {len(result.added)} added, "
            f"{len(result.errors)} rejected",
            extra={"country_id": country_id, "count": len(result.added)},
        )
        return result

    async def get_neighbors(self, country_id: CountryId) -> list[dict]:
        await self._require_country(country_id)
        neighbor_ids = await self.neighbors.query(country_id)
        if not neighbor_ids:
            return []

        records = await self.countries.get_many(neighbor_ids)
        neighbors = []
        for neighbor_id in neighbor_ids:
            record = records.get(neighbor_id)
            if record is None:
                logger.warning(
                    "Orphaned neighbor reference skipped",
                    extra={"country_id": country_id, "neighbor_id": neighbor_id},
                )
                continue
            neighbors.append(project_neighbor(record))
        return neighbors
