"""Package Schemas — request/response models for the packages API.

Invariants:
    - Ids in requests are plain strings: UUID v4 syntax is checked by the ledger
    - PackageResponse fields are exactly the keys of Package.to_dict()

Design Decisions:
    - camelCase aliases with populate_by_name: clients may send either form
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from parcel_ledger.core.records import HistoryEntry, Package
from parcel_ledger.schemas.holder import HolderResponse


class PackageCreate(BaseModel):
    """Package creation request."""
    model_config = ConfigDict(populate_by_name=True)

    sender_id: str = Field(alias="senderId")
    recipient_id: str = Field(alias="recipientId")
    first_holder_id: str = Field(alias="firstHolderId")


class PackageAdvance(BaseModel):
    """Custody transfer request."""
    model_config = ConfigDict(populate_by_name=True)

    new_holder_id: str = Field(alias="newHolderId")


class HistoryEntryResponse(BaseModel):
    """One custody event."""
    model_config = ConfigDict(populate_by_name=True)

    package_holder: HolderResponse = Field(alias="packageHolder")
    timestamp: int

    @classmethod
    def from_record(cls, entry: HistoryEntry) -> "HistoryEntryResponse":
        return cls.model_validate(entry.to_dict())


class PackageResponse(BaseModel):
    """Full package record."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    status: Literal["processing", "in_transit", "delivered"]
    sender: HolderResponse
    recipient: HolderResponse
    current_package_holder: HolderResponse = Field(alias="currentPackageHolder")
    delivery_history: list[HistoryEntryResponse] = Field(alias="deliveryHistory")
    created_at: int = Field(alias="createdAt")

    @classmethod
    def from_record(cls, package: Package) -> "PackageResponse":
        return cls.model_validate(package.to_dict())
