"""ORM Models: SQLAlchemy declarative models for countries and the neighbor relation.

Invariants:
    - All models inherit from Base (db/base.py)
    - No foreign keys between the two tables: integrity is checked by NeighborService

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from countries_api.models.country import Country  # noqa: F401
from countries_api.models.country_neighbor import CountryNeighbor  # noqa: F401
