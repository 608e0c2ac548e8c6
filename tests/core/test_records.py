"""Ledger Records — serialization shape and immutability.

Tests:
    - to_dict uses the stored wire keys
    - from_dict reconstructs an equal record
    - Records are frozen
"""

import dataclasses

import pytest

from parcel_ledger.core.domain_types import PackageStatus
from parcel_ledger.core.records import Holder, HistoryEntry, Package

SENDER = Holder(uuid="7f1c8a8e-6f0e-4c8e-9a51-0d3f2b0d9a01", name="Alice")
RECIPIENT = Holder(uuid="0b6b7c0a-3f9d-4f1e-8b6e-5a2f3c4d5e02", name="Bob")
COURIER = Holder(uuid="a3d5e7f9-1b2c-4d3e-9f4a-6b7c8d9e0f03", name="Carol")


def _package() -> Package:
    return Package(
        id="c0ffee00-1234-4abc-8def-0123456789ab",
        status=PackageStatus.PROCESSING,
        sender=SENDER,
        recipient=RECIPIENT,
        current_holder=COURIER,
        delivery_history=(
            HistoryEntry(SENDER, 100), HistoryEntry(COURIER, 100),
        ),
        created_at=100,
    )


def test_holder_to_dict():
    assert SENDER.to_dict() == {"uuid": SENDER.uuid, "name": "Alice"}


def test_history_entry_to_dict():
    assert HistoryEntry(COURIER, 7).to_dict() == {
        "packageHolder": {"uuid": COURIER.uuid, "name": "Carol"},
        "timestamp": 7,
    }


def test_package_to_dict_keys():
    data = _package().to_dict()
    assert set(data) == {
        "id", "status", "sender", "recipient", "currentPackageHolder",
        "deliveryHistory", "createdAt",
    }
    assert data["status"] == "processing"
    assert len(data["deliveryHistory"]) == 2


def test_package_from_dict_restores_equal_record():
    package = _package()
    assert Package.from_dict(package.to_dict()) == package


def test_from_dict_accepts_string_timestamps():
    data = _package().to_dict()
    data["createdAt"] = "100"
    data["deliveryHistory"][0]["timestamp"] = "100"
    assert Package.from_dict(data).created_at == 100


def test_holder_ids_covers_history():
    assert _package().holder_ids == {SENDER.uuid, COURIER.uuid}


def test_records_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SENDER.name = "Mallory"
    with pytest.raises(dataclasses.FrozenInstanceError):
        _package().status = PackageStatus.DELIVERED
