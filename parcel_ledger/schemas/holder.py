"""Holder Schemas — request/response models for the holders API.

Invariants:
    - HolderCreate.name is bounded; emptiness is checked by the registry so the
      error envelope is identical for API and direct callers
"""

from pydantic import BaseModel, Field

from parcel_ledger.core.records import Holder


class HolderCreate(BaseModel):
    """Holder registration request."""
    name: str = Field(max_length=200)


class HolderResponse(BaseModel):
    """Public holder data."""
    uuid: str
    name: str

    @classmethod
    def from_record(cls, holder: Holder) -> "HolderResponse":
        return cls.model_validate(holder.to_dict())
