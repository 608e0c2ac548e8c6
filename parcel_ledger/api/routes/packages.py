"""Package Routes — create, fetch, list and advance packages.

Invariants:
    - Routes contain no lifecycle rules; LedgerError propagates to the global handler
    - Path ids are raw str so UUID validation stays in the ledger
    - PUT /{package_id}/holder is the only mutating route after creation
"""

from fastapi import APIRouter, Depends, status

from parcel_ledger.api.dependencies import get_ledger
from parcel_ledger.schemas.package import (
    HistoryEntryResponse, PackageAdvance, PackageCreate, PackageResponse,
)
from parcel_ledger.services.package_ledger import PackageLedger

router = APIRouter(prefix="/api/v1/packages", tags=["packages"])


@router.post(
    "", response_model=PackageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_package(
    body: PackageCreate, ledger: PackageLedger = Depends(get_ledger),
):
    """Create a package in the processing state."""
    package = await ledger.create_package(
        body.sender_id, body.recipient_id, body.first_holder_id,
    )
    return PackageResponse.from_record(package)


@router.get("", response_model=list[PackageResponse])
async def list_packages(ledger: PackageLedger = Depends(get_ledger)):
    """List every package, ordered by id."""
    return [PackageResponse.from_record(p) for p in await ledger.list_packages()]


@router.get("/{package_id}", response_model=PackageResponse)
async def get_package_by_id(
    package_id: str, ledger: PackageLedger = Depends(get_ledger),
):
    """Get one package record."""
    return PackageResponse.from_record(await ledger.get_package(package_id))


@router.get(
    "/{package_id}/history", response_model=list[HistoryEntryResponse],
)
async def get_delivery_history(
    package_id: str, ledger: PackageLedger = Depends(get_ledger),
):
    """Chronological custody trail."""
    return [
        HistoryEntryResponse.from_record(e)
        for e in await ledger.get_delivery_history(package_id)
    ]


@router.put("/{package_id}/holder", response_model=PackageResponse)
async def update_package(
    package_id: str, body: PackageAdvance,
    ledger: PackageLedger = Depends(get_ledger),
):
    """Transfer custody to a new holder (advances status)."""
    package = await ledger.advance_package(package_id, body.new_holder_id)
    return PackageResponse.from_record(package)
