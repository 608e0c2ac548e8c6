"""Database Infrastructure — SQLAlchemy Base and schema bootstrap.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)
"""
