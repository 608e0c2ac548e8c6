"""Holder Registry — registration and lookup of package holders.

Invariants:
    - Every holder gets a fresh UUID v4 key never issued before by this store
    - Names are non-empty after stripping; duplicates rejected when the policy is on
    - Holders are immutable once stored; the registry never deletes
    - register() runs under the registry lock (duplicate check + insert are atomic)

Design Decisions:
    - Store injected, not imported: the app lifespan owns store lifetime
    - Duplicate-name rejection is a constructor flag so both policies stay testable
"""

import asyncio
import logging

from parcel_ledger.core.domain_types import HolderId
from parcel_ledger.core.errors import (
    DuplicateHolderNameError, ErrorContext, NotFoundError,
)
from parcel_ledger.core.holder_rules import check_unique_name, normalize_name
from parcel_ledger.core.identifiers import IdFactory, new_id, require_uuid
from parcel_ledger.core.records import Holder
from parcel_ledger.core.repository_protocols import KeyValueStore

logger = logging.getLogger(__name__)


class HolderRegistry:
    """Maps holder id -> Holder over an injected key-value store."""

    def __init__(
        self,
        store: KeyValueStore,
        id_factory: IdFactory = new_id,
        reject_duplicate_names: bool = True,
    ):
        self.store = store
        self.id_factory = id_factory
        self.reject_duplicate_names = reject_duplicate_names
        self._lock = asyncio.Lock()

    async def register(self, name: str) -> Holder:
        """Create and store a new holder."""
        name = normalize_name(name)
        async with self._lock:
            if self.reject_duplicate_names:
                try:
                    check_unique_name(name, await self.list_all())
                except DuplicateHolderNameError:
                    logger.warning(
                        f"Rejected duplicate holder name '{name}'",
                        extra={"operation": "register"},
                    )
                    raise
            holder = Holder(uuid=await self._fresh_id(), name=name)
            await self.store.insert(holder.uuid, holder.to_dict())
        logger.info(
            "Registered package holder",
            extra={"holder_id": holder.uuid, "operation": "register"},
        )
        return holder

    async def lookup(self, holder_id: str) -> Holder:
        """Return the holder for holder_id."""
        key = require_uuid(holder_id, "holder_id")
        data = await self.store.get(key)
        if data is None:
            raise NotFoundError(
                "Package holder", key,
                ErrorContext(holder_id=key, operation="lookup"),
            )
        return Holder.from_dict(data)

    async def list_all(self) -> list[Holder]:
        return [Holder.from_dict(d) for d in await self.store.values()]

    async def _fresh_id(self) -> HolderId:
        candidate = self.id_factory()
        while await self.store.contains(candidate):
            candidate = self.id_factory()
        return HolderId(candidate)
