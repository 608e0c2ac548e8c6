"""Package Lifecycle — pure custody-transfer state machine.

Invariants:
    - processing (creation only) -> in_transit (zero or more) -> delivered (terminal)
    - Status never moves backward; delivered rejects every further transfer
    - delivery_history is seeded with (sender, now), (first holder, now) sharing ONE timestamp
    - A holder already present in delivery_history can never receive the package again
    - Every function here is PURE: returns a new Package, never mutates its inputs

Design Decisions:
    - Delivered is decided by the INCOMING holder: custody reaching the recipient
      is delivery, even on the very first transfer (processing -> delivered)
    - Holder snapshots are fresh copies so a record never aliases registry data
"""

from dataclasses import replace

from parcel_ledger.core.domain_types import (
    HolderId, PackageId, PackageStatus, Timestamp,
)
from parcel_ledger.core.errors import (
    AlreadyDeliveredError, ErrorContext, HolderAlreadyHeldPackageError,
)
from parcel_ledger.core.records import Holder, HistoryEntry, Package


def snapshot(holder: Holder) -> Holder:
    """Copy a holder by value for embedding in a package record."""
    return replace(holder)


def new_package(
    package_id: PackageId,
    sender: Holder,
    recipient: Holder,
    first_holder: Holder,
    now: Timestamp,
) -> Package:
    """Build a freshly created package in the processing state."""
    return Package(
        id=package_id,
        status=PackageStatus.PROCESSING,
        sender=snapshot(sender),
        recipient=snapshot(recipient),
        current_holder=snapshot(first_holder),
        delivery_history=(
            HistoryEntry(snapshot(sender), now),
            HistoryEntry(snapshot(first_holder), now),
        ),
        created_at=now,
    )


def next_status(package: Package, new_holder_id: HolderId) -> PackageStatus:
    """Status after custody passes to new_holder_id."""
    if new_holder_id == package.recipient.uuid:
        return PackageStatus.DELIVERED
    return PackageStatus.IN_TRANSIT


def check_can_advance(package: Package, new_holder: Holder) -> None:
    """Raise ConflictError if the transfer would break the lifecycle."""
    context = ErrorContext(
        package_id=package.id, holder_id=new_holder.uuid,
        operation="advance_package",
    )
    if package.status.is_terminal:
        raise AlreadyDeliveredError(package.id, context)
    if new_holder.uuid in package.holder_ids:
        raise HolderAlreadyHeldPackageError(package.id, new_holder.uuid, context)


def advance(package: Package, new_holder: Holder, now: Timestamp) -> Package:
    """Transfer custody to new_holder. Checks guards, returns the updated record."""
    check_can_advance(package, new_holder)
    held = snapshot(new_holder)
    return replace(
        package,
        status=next_status(package, held.uuid),
        current_holder=held,
        delivery_history=package.delivery_history + (HistoryEntry(held, now),),
    )
