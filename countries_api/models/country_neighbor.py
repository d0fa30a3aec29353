"""CountryNeighbor ORM: directed adjacency pairs between country records.

Invariants:
    - (country_id, neighbor_id) is unique: the pair is the relation's key
    - Directed: a row A->B says nothing about B->A
    - seq grows with insertion order; neighbor listings are ordered by it

Design Decisions:
    - No foreign keys to countries: the relation store does not enforce integrity,
      NeighborService validates membership before inserting
    - Surrogate seq over created_at ordering: timestamps can tie within one request
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column

from countries_api.db.base import Base
from countries_api.db.types import UTCDateTime


class CountryNeighbor(Base):
    """Directed edge: country_id lists neighbor_id as a neighbor."""
    __tablename__ = "country_neighbors"
    __table_args__ = (
        UniqueConstraint(
            "country_id", "neighbor_id", name="uq_country_neighbors_pair",
        ),
        Index("ix_country_neighbors_country_id", "country_id"),
    )

    seq: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    country_id: Mapped[str] = mapped_column(String(36), nullable=False)
    neighbor_id: Mapped[str] = mapped_column(String(36), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self) -> dict:
        return {
            "country_id": self.country_id,
            "neighbor_id": self.neighbor_id,
            "created_at": self.created_at,
        }
