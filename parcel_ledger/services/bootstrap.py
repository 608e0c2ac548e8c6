"""Component Wiring — builds stores, registry and ledger from settings.

Invariants:
    - Exactly two stores per process: holders and packages
    - Store handles are passed explicitly into components (no ambient singletons)
    - close() releases the database engine when one was created

Design Decisions:
    - Separate from main.py so scripts and tests can wire components without FastAPI
"""

import logging
from dataclasses import dataclass, field

from parcel_ledger.config import Settings
from parcel_ledger.core.domain_types import StorageBackend
from parcel_ledger.core.repository_protocols import KeyValueStore
from parcel_ledger.db.session import create_schema
from parcel_ledger.infrastructure.database import DatabaseSessionManager
from parcel_ledger.infrastructure.memory_store import InMemoryStore
from parcel_ledger.infrastructure.sql_store import SqlKeyValueStore
from parcel_ledger.models import HolderRecord, PackageRecord
from parcel_ledger.services.holder_registry import HolderRegistry
from parcel_ledger.services.package_ledger import PackageLedger

logger = logging.getLogger(__name__)


@dataclass
class LedgerComponents:
    """Everything the hosting layer needs, with process lifetime."""
    holders: KeyValueStore
    packages: KeyValueStore
    registry: HolderRegistry
    ledger: PackageLedger
    db: DatabaseSessionManager | None = field(default=None)

    @property
    def stores(self) -> dict[str, KeyValueStore]:
        return {"holders": self.holders, "packages": self.packages}

    async def close(self) -> None:
        if self.db is not None:
            await self.db.dispose()


def wire_components(
    holders: KeyValueStore,
    packages: KeyValueStore,
    reject_duplicate_names: bool = True,
    db: DatabaseSessionManager | None = None,
) -> LedgerComponents:
    """Connect registry and ledger to the given stores."""
    registry = HolderRegistry(
        holders, reject_duplicate_names=reject_duplicate_names,
    )
    ledger = PackageLedger(packages, registry)
    return LedgerComponents(holders, packages, registry, ledger, db)


async def build_components(settings: Settings) -> LedgerComponents:
    """Create stores for the configured backend and wire the components."""
    if settings.storage_backend is StorageBackend.MEMORY:
        logger.info("Using in-memory stores")
        return wire_components(
            InMemoryStore("holders"), InMemoryStore("packages"),
            settings.reject_duplicate_holder_names,
        )

    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await create_schema(db.engine)
    logger.info("Using database stores")
    return wire_components(
        SqlKeyValueStore(db, HolderRecord),
        SqlKeyValueStore(db, PackageRecord),
        settings.reject_duplicate_holder_names,
        db,
    )
