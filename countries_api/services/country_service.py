"""Country Service: create/read/update/delete/list over the country collection.

Invariants:
    - Ids are uuid4 strings assigned here, exactly once, at creation
    - update and delete call get() first: a missing id raises ResourceNotFoundError
      and nothing is written
    - update is a full replace: every field comes from the patch, except id and
      created_at which are preserved; updated_at is refreshed
    - list_all is an unordered, unpaginated full scan (administrative use)

Design Decisions:
    - Payloads validated here as well as at the route: the service is callable
      without the HTTP layer and must reject non-sequences itself
    - Batch create commits once: all-or-nothing is stricter than per-item writes
"""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from countries_api.core.domain_types import CountryId
from countries_api.core.errors import ResourceNotFoundError
from countries_api.core.repository_protocols import CountryStore
from countries_api.schemas.country import parse_country_payload, parse_country_payloads

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CountryService:
    """Record CRUD over CountryStore."""

    def __init__(self, store: CountryStore):
        self.store = store

    async def create(self, records: Any) -> list[dict]:
        """Assign ids and timestamps, then write all records as one batch."""
        payloads = parse_country_payloads(records)
        now = _now()
        items = [
            {
                **payload.model_dump(),
                "id": str(uuid4()),
                "created_at": now,
                "updated_at": now,
            }
            for payload in payloads
        ]
        return await self.store.put_many(items)

    async def get(self, country_id: CountryId) -> dict:
        record = await self.store.get(country_id)
        if record is None:
            raise ResourceNotFoundError("Country", str(country_id))
        return record

    async def update(self, country_id: CountryId, patch: Any) -> dict:
        existing = await self.get(country_id)
        payload = parse_country_payload(patch)
        record = {
            **payload.model_dump(),
            "id": existing["id"],
            "created_at": existing["created_at"],
            "updated_at": _now(),
        }
        updated = await self.store.put(record)
        logger.info("Country updated", extra={"country_id": existing["id"]})
        return updated

    async def delete(self, country_id: CountryId) -> None:
        existing = await self.get(country_id)
        await self.store.delete(existing["id"])
        logger.info("Country deleted", extra={"country_id": existing["id"]})

    async def list_all(self) -> list[dict]:
        return await self.store.scan()
