"""ORM Models — one table per key-value map.

Invariants:
    - All models inherit from Base (db/base.py)
    - Each row is a key plus the full JSON record; no partial-field columns

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from parcel_ledger.models.holder_record import HolderRecord  # noqa: F401
from parcel_ledger.models.package_record import PackageRecord  # noqa: F401
