"""Neighbor Routes: add and list a country's neighbors.

Invariants:
    - Unknown country -> 404 from the global handler (ResourceNotFoundError)
    - Zero additions -> 400 carrying the per-item errors and an empty list
    - At least one addition -> 200 carrying added ids and any per-item errors
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from countries_api.api.dependencies import get_neighbor_service
from countries_api.schemas.country import NeighborCountry, NeighborsAddRequest
from countries_api.services.neighbor_service import NeighborService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/countries", tags=["neighbors"])


@router.post("/{country_id}/neighbors")
async def add_neighbors(
    country_id: str,
    body: NeighborsAddRequest,
    service: NeighborService = Depends(get_neighbor_service),
):
    """Add directed neighbor edges country_id -> each listed id."""
    result = await service.add_neighbors(country_id, body.neighbors)
    if not result.succeeded:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Failed to add neighbors",
                "data": {"neighbors": [], "errors": result.errors},
            },
        )
    return {
        "message": "Neighbors added successfully",
        "data": {"neighbors": result.added},
        "errors": result.errors,
    }


@router.get("/{country_id}/neighbors")
async def get_neighbors(
    country_id: str,
    service: NeighborService = Depends(get_neighbor_service),
):
    """Denormalized neighbor records, in the order they were added."""
    neighbors = await service.get_neighbors(country_id)
    return {
        "message": "Country neighbours",
        "data": {
            "countries": [
                NeighborCountry.model_validate(n).model_dump() for n in neighbors
            ],
        },
    }
