"""API Dependencies — hand route handlers the components built in the lifespan.

Invariants:
    - Components live on app.state; routes never construct stores themselves
"""

from fastapi import Request

from parcel_ledger.services.holder_registry import HolderRegistry
from parcel_ledger.services.package_ledger import PackageLedger


def get_registry(request: Request) -> HolderRegistry:
    return request.app.state.registry


def get_ledger(request: Request) -> PackageLedger:
    return request.app.state.ledger
