"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations may do IO, but the lifecycle rules
      that use the records are never async themselves
    - Whole-record values: insert() always rewrites the full JSON dict under its key
"""

from typing import Callable, Protocol

from parcel_ledger.core.domain_types import Timestamp

Clock = Callable[[], Timestamp]


class KeyValueStore(Protocol):
    """Ordered key-value map of JSON records, one instance per entity type."""
    async def get(self, key: str) -> dict | None: ...
    async def insert(self, key: str, value: dict) -> None: ...
    async def contains(self, key: str) -> bool: ...
    async def values(self) -> list[dict]: ...
    async def health_check(self) -> bool: ...
