"""Package & Holder Schemas — alias handling and record conversion."""

import pytest
from pydantic import ValidationError

from parcel_ledger.core.package_lifecycle import new_package
from parcel_ledger.core.records import Holder
from parcel_ledger.schemas.holder import HolderCreate, HolderResponse
from parcel_ledger.schemas.package import (
    PackageAdvance, PackageCreate, PackageResponse,
)

SENDER = Holder(uuid="7f1c8a8e-6f0e-4c8e-9a51-0d3f2b0d9a01", name="Alice")
RECIPIENT = Holder(uuid="0b6b7c0a-3f9d-4f1e-8b6e-5a2f3c4d5e02", name="Bob")
COURIER = Holder(uuid="a3d5e7f9-1b2c-4d3e-9f4a-6b7c8d9e0f03", name="Carol")


def test_package_create_accepts_camel_and_snake():
    camel = PackageCreate.model_validate(
        {"senderId": "a", "recipientId": "b", "firstHolderId": "c"},
    )
    snake = PackageCreate(sender_id="a", recipient_id="b", first_holder_id="c")
    assert camel == snake


def test_package_advance_requires_holder():
    with pytest.raises(ValidationError):
        PackageAdvance.model_validate({})


def test_holder_create_max_length():
    with pytest.raises(ValidationError):
        HolderCreate(name="x" * 201)


def test_holder_response_from_record():
    assert HolderResponse.from_record(SENDER).model_dump() == SENDER.to_dict()


def test_package_response_dumps_record_shape():
    package = new_package(
        "c0ffee00-1234-4abc-8def-0123456789ab", SENDER, RECIPIENT, COURIER, 5,
    )
    dumped = PackageResponse.from_record(package).model_dump(by_alias=True)
    assert dumped == package.to_dict()
