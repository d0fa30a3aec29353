"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - CountryId wraps the opaque string id assigned at creation (uuid4 text)
    - Every sort order maps to exactly one (field, direction) pair
    - Unknown sort values resolve to A_TO_Z, never raise

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and compare against raw query strings directly
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CountryId = NewType("CountryId", str)


# ─── Enums ───────────────────────────────────────────────────────

class SortOption(str, Enum):
    """Listing sort orders accepted by the paginated listing."""
    A_TO_Z = "a_to_z"
    Z_TO_A = "z_to_a"
    POPULATION_HIGH_TO_LOW = "population_high_to_low"
    POPULATION_LOW_TO_HIGH = "population_low_to_high"
    AREA_HIGH_TO_LOW = "area_high_to_low"
    AREA_LOW_TO_HIGH = "area_low_to_high"

    @property
    def field(self) -> str:
        return _SORT_FIELDS[self][0]

    @property
    def descending(self) -> bool:
        return _SORT_FIELDS[self][1]

    @classmethod
    def resolve(cls, value: str | None) -> "SortOption":
        """Map a raw query value to a sort option, defaulting to A_TO_Z."""
        try:
            return cls(value)
        except ValueError:
            return cls.A_TO_Z


_SORT_FIELDS: dict[SortOption, tuple[str, bool]] = {
    SortOption.A_TO_Z: ("name", False),
    SortOption.Z_TO_A: ("name", True),
    SortOption.POPULATION_HIGH_TO_LOW: ("population", True),
    SortOption.POPULATION_LOW_TO_HIGH: ("population", False),
    SortOption.AREA_HIGH_TO_LOW: ("area", True),
    SortOption.AREA_LOW_TO_HIGH: ("area", False),
}


# Public projection used for denormalized neighbor listings
NEIGHBOR_FIELDS: tuple[str, ...] = (
    "id", "name", "cca3", "currency_code", "currency", "capital",
    "region", "subregion", "area", "map_url", "population", "flag_url",
)
