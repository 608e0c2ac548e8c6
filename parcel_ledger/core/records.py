"""Ledger Records — immutable Holder, HistoryEntry and Package values.

Invariants:
    - All records are frozen: a mutation produces a new record (dataclasses.replace)
    - Holder data embedded in a Package is a snapshot, never a live reference
    - delivery_history is a tuple: append-only by construction
    - to_dict produces a JSON-safe dict; from_dict(to_dict(r)) == r

Design Decisions:
    - Frozen dataclasses over ORM rows: the store persists whole records, so the
      domain value is the unit of persistence
    - camelCase wire keys: records are stored and served in the same shape
"""

from dataclasses import dataclass

from parcel_ledger.core.domain_types import (
    HolderId, PackageId, PackageStatus, Timestamp,
)


@dataclass(frozen=True)
class Holder:
    """A party that can possess a package: sender, recipient, or courier."""
    uuid: HolderId
    name: str

    def to_dict(self) -> dict:
        return {"uuid": self.uuid, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict) -> "Holder":
        return cls(uuid=HolderId(data["uuid"]), name=data["name"])


@dataclass(frozen=True)
class HistoryEntry:
    """A holder snapshot paired with the moment custody was recorded."""
    holder: Holder
    timestamp: Timestamp

    def to_dict(self) -> dict:
        return {
            "packageHolder": self.holder.to_dict(),
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        return cls(
            holder=Holder.from_dict(data["packageHolder"]),
            timestamp=Timestamp(int(data["timestamp"])),
        )


@dataclass(frozen=True)
class Package:
    """A tracked package and its full custody trail."""
    id: PackageId
    status: PackageStatus
    sender: Holder
    recipient: Holder
    current_holder: Holder
    delivery_history: tuple[HistoryEntry, ...]
    created_at: Timestamp

    @property
    def holder_ids(self) -> set[HolderId]:
        """Every holder that has appeared in the delivery history."""
        return {entry.holder.uuid for entry in self.delivery_history}

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "status": self.status.value,
            "sender": self.sender.to_dict(),
            "recipient": self.recipient.to_dict(),
            "currentPackageHolder": self.current_holder.to_dict(),
            "deliveryHistory": [e.to_dict() for e in self.delivery_history],
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Package":
        return cls(
            id=PackageId(data["id"]),
            status=PackageStatus(data["status"]),
            sender=Holder.from_dict(data["sender"]),
            recipient=Holder.from_dict(data["recipient"]),
            current_holder=Holder.from_dict(data["currentPackageHolder"]),
            delivery_history=tuple(
                HistoryEntry.from_dict(e) for e in data["deliveryHistory"]
            ),
            created_at=Timestamp(int(data["createdAt"])),
        )
