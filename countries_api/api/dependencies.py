"""Service Dependencies: FastAPI providers wiring request sessions into services.

Invariants:
    - One AsyncSession per request, shared by every store the request touches
    - Services are rebuilt per request; only db_manager lives for the process
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from countries_api.config import get_settings
from countries_api.infrastructure.database import get_db
from countries_api.services.country_service import CountryService
from countries_api.services.country_store import SqlCountryStore
from countries_api.services.listing_service import ListingService
from countries_api.services.neighbor_service import NeighborService
from countries_api.services.neighbor_store import SqlNeighborStore


def get_country_service(db: AsyncSession = Depends(get_db)) -> CountryService:
    return CountryService(SqlCountryStore(db))


def get_neighbor_service(db: AsyncSession = Depends(get_db)) -> NeighborService:
    return NeighborService(SqlCountryStore(db), SqlNeighborStore(db))


def get_listing_service(db: AsyncSession = Depends(get_db)) -> ListingService:
    return ListingService(
        SqlCountryStore(db),
        default_page_size=get_settings().default_page_size,
    )
