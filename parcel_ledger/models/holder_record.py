"""Holder Record ORM — the holders key-value map.

Invariants:
    - key is the holder UUID v4 string (primary key, ordering key)
    - payload holds the full serialized Holder
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from parcel_ledger.db.base import Base


class HolderRecord(Base):
    """Row in the holders map."""
    __tablename__ = "holders"

    key: Mapped[str] = mapped_column(String(36), primary_key=True)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
