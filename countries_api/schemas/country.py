"""Country Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - CountryCreate never carries an id: a caller-supplied id is dropped
    - area >= 0, population >= 0 (integer)
    - NeighborsAddRequest.neighbors normalizes to a flat list of id strings
    - parse_country_payloads reports every field failure across every item

Design Decisions:
    - extra="ignore" on CountryCreate: ids and timestamps in a payload are silently
      discarded, the service assigns them
    - Neighbor items accept either "id" or {"neighborId": "id"} (legacy wire shape)
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from countries_api.core.errors import InvalidInputError


class CountryCreate(BaseModel):
    """Country payload for create and full-replace update."""
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    currency: str = Field(min_length=1, max_length=100)
    currency_code: str | None = Field(None, max_length=10)
    cca3: str | None = Field(None, max_length=3)
    capital: str = Field(min_length=1, max_length=200)
    region: str = Field(min_length=1, max_length=100)
    subregion: str = Field(min_length=1, max_length=100)
    area: float = Field(ge=0)
    population: int = Field(ge=0)
    flag_url: str = Field(min_length=1)
    map_url: str | None = None
    neighbors: list[str] | None = None


class CountryResponse(CountryCreate):
    """Stored country record as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime


class NeighborCountry(BaseModel):
    """Denormalized public view of a neighbor."""
    id: str
    name: str
    cca3: str | None = None
    currency_code: str | None = None
    currency: str | None = None
    capital: str | None = None
    region: str | None = None
    subregion: str | None = None
    area: float | None = None
    map_url: str | None = None
    population: int | None = None
    flag_url: str | None = None


class NeighborsAddRequest(BaseModel):
    """Body of POST /countries/{id}/neighbors."""
    neighbors: list[str]

    @field_validator("neighbors", mode="before")
    @classmethod
    def flatten_neighbor_refs(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return v
        return [
            item.get("neighborId") if isinstance(item, dict) else item
            for item in v
        ]


# --- Validation helpers -------------------------------------------------------


def parse_country_payload(raw: Any) -> CountryCreate:
    """Validate one payload, raising InvalidInputError with all field failures."""
    if isinstance(raw, CountryCreate):
        return raw
    try:
        return CountryCreate.model_validate(raw)
    except ValidationError as exc:
        raise InvalidInputError(
            "Invalid country payload", details=_error_details(exc),
        ) from exc


def parse_country_payloads(raw: Any) -> list[CountryCreate]:
    """Validate a list of payloads. Non-sequences are rejected outright."""
    if isinstance(raw, (str, bytes, dict)) or not isinstance(raw, Sequence):
        raise InvalidInputError("Request body should be an array of countries.")

    parsed: list[CountryCreate] = []
    details: list[dict] = []
    for index, item in enumerate(raw):
        if isinstance(item, CountryCreate):
            parsed.append(item)
            continue
        try:
            parsed.append(CountryCreate.model_validate(item))
        except ValidationError as exc:
            details.extend(_error_details(exc, prefix=str(index)))
    if details:
        raise InvalidInputError("Invalid country payload", details=details)
    return parsed


def _error_details(exc: ValidationError, prefix: str | None = None) -> list[dict]:
    head = [prefix] if prefix is not None else []
    return [
        {
            "field": ".".join([*head, *(str(loc) for loc in e["loc"])]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
