"""SQL Store — KeyValueStore backed by one ORM table per map.

Invariants:
    - insert() is an upsert that rewrites the full payload under the key
    - values() ordered by primary key
    - Each call runs in its own session; commit happens inside the call
    - SQLAlchemy errors surface as StorageError (via DatabaseSessionManager)

Design Decisions:
    - session.merge for upsert: dialect-neutral (SQLite tests, PostgreSQL prod)
    - Model class injected: the same store serves HolderRecord and PackageRecord
"""

import logging

from sqlalchemy import select

from parcel_ledger.db.base import Base
from parcel_ledger.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)


class SqlKeyValueStore:
    """Ordered key-value map persisted in a single table."""

    def __init__(self, db: DatabaseSessionManager, model: type[Base]):
        self.db = db
        self.model = model

    async def get(self, key: str) -> dict | None:
        async with self.db.session() as session:
            row = await session.get(self.model, key)
            return dict(row.payload) if row else None

    async def insert(self, key: str, value: dict) -> None:
        async with self.db.session() as session:
            await session.merge(self.model(key=key, payload=value))
            await session.commit()
        logger.debug(
            f"Wrote {self.model.__tablename__} record",
            extra={"operation": "insert"},
        )

    async def contains(self, key: str) -> bool:
        async with self.db.session() as session:
            result = await session.execute(
                select(self.model.key).where(self.model.key == key),
            )
            return result.scalar_one_or_none() is not None

    async def values(self) -> list[dict]:
        async with self.db.session() as session:
            result = await session.execute(
                select(self.model).order_by(self.model.key),
            )
            return [dict(row.payload) for row in result.scalars().all()]

    async def health_check(self) -> bool:
        return await self.db.health_check()
