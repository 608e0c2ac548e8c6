"""Schema Bootstrap — create tables directly for local runs and test fixtures.

Invariants:
    - create_schema is idempotent (create_all skips existing tables)
    - Production schema changes go through Alembic, not this helper

Design Decisions:
    - Imports parcel_ledger.models so Base.metadata is complete before create_all
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from parcel_ledger.db.base import Base
import parcel_ledger.models  # noqa: F401


async def create_schema(engine: AsyncEngine) -> None:
    """Create the holders and packages tables if they do not exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
