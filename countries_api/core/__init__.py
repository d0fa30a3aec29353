"""Core: pure domain logic, error hierarchy, and boundary protocols.

Invariants:
    - Core never imports from services, infrastructure, or api
    - Everything here is synchronous except Protocol method signatures
"""
