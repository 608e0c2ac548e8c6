"""Package Ledger — create, fetch and advance packages through custody transfers.

Invariants:
    - All caller ids validated (UUID v4) before any lookup
    - All holder ids resolved through the HolderRegistry before any mutation
    - Mutations are one read-modify-write of a whole record under the ledger lock
    - The store write is the last step: a StorageError there is the only way an
      operation can fail after validation ("unknown state, re-query by id")

Design Decisions:
    - Impureim sandwich: read from stores -> pure lifecycle rule -> write to store
    - Clock and id factory injected for deterministic tests
    - One asyncio.Lock per ledger: awaits between read and write could otherwise
      interleave two transfers of the same package
"""

import asyncio
import logging

from parcel_ledger.core.domain_types import PackageId
from parcel_ledger.core.errors import ConflictError, ErrorContext, NotFoundError
from parcel_ledger.core.identifiers import IdFactory, new_id, require_uuid
from parcel_ledger.core.package_lifecycle import advance, new_package
from parcel_ledger.core.records import HistoryEntry, Package
from parcel_ledger.core.repository_protocols import Clock, KeyValueStore
from parcel_ledger.infrastructure.clock import MonotonicClock
from parcel_ledger.services.holder_registry import HolderRegistry

logger = logging.getLogger(__name__)


class PackageLedger:
    """Maps package id -> Package; owns every package record."""

    def __init__(
        self,
        store: KeyValueStore,
        registry: HolderRegistry,
        clock: Clock | None = None,
        id_factory: IdFactory = new_id,
    ):
        self.store = store
        self.registry = registry
        self.clock = clock or MonotonicClock()
        self.id_factory = id_factory
        self._lock = asyncio.Lock()

    async def create_package(
        self, sender_id: str, recipient_id: str, first_holder_id: str,
    ) -> Package:
        """Create a package held by first_holder_id, in the processing state."""
        sender_key = require_uuid(sender_id, "sender_id")
        recipient_key = require_uuid(recipient_id, "recipient_id")
        first_key = require_uuid(first_holder_id, "first_holder_id")

        sender = await self.registry.lookup(sender_key)
        recipient = await self.registry.lookup(recipient_key)
        first_holder = await self.registry.lookup(first_key)

        async with self._lock:
            package = new_package(
                await self._fresh_id(), sender, recipient, first_holder,
                self.clock(),
            )
            await self.store.insert(package.id, package.to_dict())

        logger.info(
            "Created package",
            extra={
                "package_id": package.id, "holder_id": first_holder.uuid,
                "status": package.status.value, "operation": "create_package",
            },
        )
        return package

    async def get_package(self, package_id: str) -> Package:
        """Return the stored package record unchanged."""
        key = require_uuid(package_id, "package_id")
        return await self._load(key, "get_package")

    async def list_packages(self) -> list[Package]:
        return [Package.from_dict(d) for d in await self.store.values()]

    async def get_delivery_history(self, package_id: str) -> list[HistoryEntry]:
        """Chronological custody trail of one package."""
        package = await self.get_package(package_id)
        return list(package.delivery_history)

    async def advance_package(
        self, package_id: str, new_holder_id: str,
    ) -> Package:
        """Transfer custody of package_id to new_holder_id.

        Checks, in order: id syntax, new holder exists, package exists,
        package not delivered, new holder never held this package.
        Status becomes delivered when the new holder is the recipient,
        otherwise in_transit.
        """
        package_key = require_uuid(package_id, "package_id")
        holder_key = require_uuid(new_holder_id, "new_holder_id")

        new_holder = await self.registry.lookup(holder_key)

        async with self._lock:
            package = await self._load(package_key, "advance_package")
            try:
                updated = advance(package, new_holder, self.clock())
            except ConflictError as e:
                logger.warning(
                    f"Rejected custody transfer: {e.message}",
                    extra={
                        "package_id": package.id, "holder_id": new_holder.uuid,
                        "error_code": e.code, "operation": "advance_package",
                    },
                )
                raise
            await self.store.insert(updated.id, updated.to_dict())

        logger.info(
            "Advanced package",
            extra={
                "package_id": updated.id, "holder_id": new_holder.uuid,
                "status": updated.status.value, "operation": "advance_package",
            },
        )
        return updated

    async def _load(self, key: str, operation: str) -> Package:
        data = await self.store.get(key)
        if data is None:
            raise NotFoundError(
                "Package", key, ErrorContext(package_id=key, operation=operation),
            )
        return Package.from_dict(data)

    async def _fresh_id(self) -> PackageId:
        candidate = self.id_factory()
        while await self.store.contains(candidate):
            candidate = self.id_factory()
        return PackageId(candidate)
