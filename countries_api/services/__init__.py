"""Services: store adapters plus the CRUD, neighbor, and listing services built on them.

Invariants:
    - Services talk to persistence only through CountryStore and NeighborStore
    - No service depends on another service
"""
