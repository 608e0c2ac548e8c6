"""Package Record ORM — the packages key-value map.

Invariants:
    - key is the package UUID v4 string (primary key, ordering key)
    - payload holds the full serialized Package, delivery history included
    - Every advance rewrites payload as a whole

Design Decisions:
    - JSON column for the record: holder snapshots stay embedded by value,
      no foreign keys to holders (renames must not rewrite history)
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from parcel_ledger.db.base import Base


class PackageRecord(Base):
    """Row in the packages map."""
    __tablename__ = "packages"

    key: Mapped[str] = mapped_column(String(36), primary_key=True)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
