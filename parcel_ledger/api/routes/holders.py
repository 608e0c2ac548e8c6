"""Holder Routes — register, fetch and list package holders.

Invariants:
    - Routes contain no ledger rules; LedgerError propagates to the global handler
    - holder_id path param is a raw str so malformed ids reach the registry (400, not 422)
"""

from fastapi import APIRouter, Depends, status

from parcel_ledger.api.dependencies import get_registry
from parcel_ledger.schemas.holder import HolderCreate, HolderResponse
from parcel_ledger.services.holder_registry import HolderRegistry

router = APIRouter(prefix="/api/v1/holders", tags=["holders"])


@router.post(
    "", response_model=HolderResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_package_holder(
    body: HolderCreate, registry: HolderRegistry = Depends(get_registry),
):
    """Register a new package holder."""
    holder = await registry.register(body.name)
    return HolderResponse.from_record(holder)


@router.get("", response_model=list[HolderResponse])
async def get_all_package_holders(
    registry: HolderRegistry = Depends(get_registry),
):
    """List every registered holder, ordered by id."""
    return [HolderResponse.from_record(h) for h in await registry.list_all()]


@router.get("/{holder_id}", response_model=HolderResponse)
async def get_package_holder_by_id(
    holder_id: str, registry: HolderRegistry = Depends(get_registry),
):
    """Get one holder."""
    return HolderResponse.from_record(await registry.lookup(holder_id))
