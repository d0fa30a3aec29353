"""Country Routes: CRUD and paginated listing over the country collection.

Invariants:
    - POST takes a JSON array; a non-array body is a 400
    - DELETE returns 204 with an empty body
    - /paginated is registered before /{country_id} so it is never read as an id
    - page/limit arrive as raw strings; ListingService decides validity

Design Decisions:
    - page/limit typed str | None, not int: invalid values surface as the domain
      VALIDATION_ERROR with field details, same shape as programmatic callers see
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from countries_api.api.dependencies import get_country_service, get_listing_service
from countries_api.schemas.country import CountryCreate, CountryResponse
from countries_api.services.country_service import CountryService
from countries_api.services.listing_service import ListingService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/countries", tags=["countries"])


@router.post(
    "", response_model=list[CountryResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_countries(
    body: list[CountryCreate],
    service: CountryService = Depends(get_country_service),
):
    """Create one or more countries in a single batch."""
    return await service.create(body)


@router.get("", response_model=list[CountryResponse])
async def list_countries(
    service: CountryService = Depends(get_country_service),
):
    """Unordered full list of countries."""
    return await service.list_all()


@router.get("/paginated")
async def list_countries_paginated(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    sort_by: str | None = Query(None),
    search: str | None = Query(None, max_length=200),
    service: ListingService = Depends(get_listing_service),
):
    """Paginated, sorted, searchable country list."""
    envelope = await service.list_paginated(
        page=page, limit=limit, sort_by=sort_by, search=search,
    )
    envelope["list"] = [
        CountryResponse.model_validate(record).model_dump(mode="json")
        for record in envelope["list"]
    ]
    return {"message": "Country list", "data": envelope}


@router.get("/{country_id}", response_model=CountryResponse)
async def get_country(
    country_id: str,
    service: CountryService = Depends(get_country_service),
):
    return await service.get(country_id)


@router.put("/{country_id}", response_model=CountryResponse)
async def update_country(
    country_id: str,
    body: CountryCreate,
    service: CountryService = Depends(get_country_service),
):
    """Full replace of a country's fields. The id never changes."""
    return await service.update(country_id, body)


@router.delete(
    "/{country_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_country(
    country_id: str,
    service: CountryService = Depends(get_country_service),
):
    await service.delete(country_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
