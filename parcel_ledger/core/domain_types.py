"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - HolderId, PackageId wrap UUID v4 strings; never use bare str in domain logic
    - Timestamp is integer nanoseconds since the epoch
    - All valid package states encoded as an Enum; no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
    - Ids stay str (not UUID): the store is keyed by the canonical string form
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

HolderId = NewType("HolderId", str)
PackageId = NewType("PackageId", str)


# ─── Value Types ─────────────────────────────────────────────────

Timestamp = NewType("Timestamp", int)   # nanoseconds since epoch


# ─── Enums ───────────────────────────────────────────────────────

class PackageStatus(str, Enum):
    """Package lifecycle states. Order of declaration is the forward order."""
    PROCESSING = "processing"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"

    @property
    def rank(self) -> int:
        return list(PackageStatus).index(self)

    @property
    def is_terminal(self) -> bool:
        return self is PackageStatus.DELIVERED


class StorageBackend(str, Enum):
    """Key-value store implementations selectable from settings."""
    MEMORY = "memory"
    DATABASE = "database"
