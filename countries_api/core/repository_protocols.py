"""Boundary Protocols: contracts between the services and the stores.

Invariants:
    - Services never touch the ORM session directly, only these contracts
    - CountryStore owns the countries collection; NeighborStore owns country_neighbors
    - NeighborStore.insert_if_absent is atomic: True iff this call created the pair

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory fakes need no inheritance
    - Records cross the boundary as plain dicts, decoupling services from the ORM
"""

from typing import Protocol

from countries_api.core.domain_types import CountryId


class CountryStore(Protocol):
    """Contract for country record persistence."""
    async def get(self, country_id: CountryId) -> dict | None: ...
    async def get_many(self, country_ids: list[CountryId]) -> dict[str, dict]: ...
    async def put(self, record: dict) -> dict: ...
    async def put_many(self, records: list[dict]) -> list[dict]: ...
    async def delete(self, country_id: CountryId) -> None: ...
    async def scan(self, search: str | None = None) -> list[dict]: ...
    async def scan_ids(self) -> set[str]: ...


class NeighborStore(Protocol):
    """Contract for directed (country, neighbor) relation persistence."""
    async def get(
        self, country_id: CountryId, neighbor_id: CountryId,
    ) -> dict | None: ...
    async def insert_if_absent(
        self, country_id: CountryId, neighbor_id: CountryId,
    ) -> bool: ...
    async def query(self, country_id: CountryId) -> list[str]: ...
