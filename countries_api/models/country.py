"""Country ORM: persists country records keyed by a generated opaque id.

Invariants:
    - id is a uuid4 string assigned by CountryService, never by the caller
    - area and population are non-negative (validated at the schema boundary)
    - neighbors is a denormalized hint only; country_neighbors is authoritative

Design Decisions:
    - String id over native UUID: ids are opaque, malformed ids simply miss (404)
      instead of failing path parsing
    - JSON column for neighbors: stored as-is, never queried
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Float, BigInteger, JSON
from sqlalchemy.orm import Mapped, mapped_column

from countries_api.db.base import Base
from countries_api.db.types import UTCDateTime


class Country(Base):
    """Country record."""
    __tablename__ = "countries"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    currency: Mapped[str] = mapped_column(String(100), nullable=False)
    currency_code: Mapped[str | None] = mapped_column(String(10), nullable=True)
    cca3: Mapped[str | None] = mapped_column(String(3), nullable=True)
    capital: Mapped[str] = mapped_column(String(200), nullable=False)
    region: Mapped[str] = mapped_column(String(100), nullable=False)
    subregion: Mapped[str] = mapped_column(String(100), nullable=False)
    area: Mapped[float] = mapped_column(Float, nullable=False)
    population: Mapped[int] = mapped_column(BigInteger, nullable=False)
    flag_url: Mapped[str] = mapped_column(Text, nullable=False)
    map_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    neighbors: Mapped[list | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self) -> dict:
        return {
            column.key: getattr(self, column.key)
            for column in self.__table__.columns
        }
