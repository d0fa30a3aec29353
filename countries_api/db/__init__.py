"""Database Infrastructure: SQLAlchemy declarative Base shared by all models.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)
"""
