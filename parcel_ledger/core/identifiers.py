"""Identifier Validation — UUID v4 syntax checks for caller-supplied ids.

Invariants:
    - Only the canonical 36-char hyphenated form is accepted (no braces, no urn:)
    - Version nibble must be 4 and variant must be RFC 4122
    - require_uuid returns the canonical lowercase form used as the store key

Design Decisions:
    - stdlib uuid.UUID parse + round-trip check instead of a hand-written regex:
      the parser already knows the layout, the round-trip rejects exotic forms
"""

from typing import Callable
from uuid import UUID, RFC_4122, uuid4

from parcel_ledger.core.errors import ValidationError

IdFactory = Callable[[], str]


def new_id() -> str:
    """Default id factory: a fresh random UUID v4 string."""
    return str(uuid4())


def is_valid_uuid(value: object) -> bool:
    """True if value is a canonical UUID v4 string."""
    if not isinstance(value, str) or len(value) != 36:
        return False
    try:
        parsed = UUID(value)
    except ValueError:
        return False
    return (
        parsed.version == 4
        and parsed.variant == RFC_4122
        and str(parsed) == value.lower()
    )


def require_uuid(value: object, field: str) -> str:
    """Validate a caller-supplied id. Raises ValidationError on empty or malformed input."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field} is required", field)
    if not is_valid_uuid(value):
        raise ValidationError(f"Invalid {field}: '{value}'", field)
    return value.lower()
