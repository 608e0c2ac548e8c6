"""Holder Rules — name validation and uniqueness for registration.

Invariants:
    - Names are stored stripped; empty or whitespace-only names are rejected
    - Uniqueness is compared on the stripped name, case-sensitive
"""

from typing import Iterable

from parcel_ledger.core.errors import (
    DuplicateHolderNameError, ErrorContext, ValidationError,
)
from parcel_ledger.core.records import Holder


def normalize_name(name: object) -> str:
    """Return the stripped name or raise ValidationError."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name is required", "name")
    return name.strip()


def check_unique_name(name: str, existing: Iterable[Holder]) -> None:
    """Raise DuplicateHolderNameError if any existing holder already uses name."""
    for holder in existing:
        if holder.name == name:
            raise DuplicateHolderNameError(
                name, ErrorContext(holder_id=holder.uuid, operation="register"),
            )
