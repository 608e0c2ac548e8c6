"""Root conftest — shared test configuration and ledger fixtures.

Invariants:
    - Tests never touch a real database file: memory backend by default
    - fake_clock is strictly increasing so every history entry is distinguishable
"""

import os

# Must be set before parcel_ledger.main builds its settings
os.environ.setdefault("PARCEL_STORAGE_BACKEND", "memory")
os.environ.setdefault("PARCEL_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PARCEL_LOG_FORMAT", "text")

import pytest  # noqa: E402

from parcel_ledger.core.domain_types import Timestamp  # noqa: E402
from parcel_ledger.infrastructure.memory_store import InMemoryStore  # noqa: E402
from parcel_ledger.services.holder_registry import HolderRegistry  # noqa: E402
from parcel_ledger.services.package_ledger import PackageLedger  # noqa: E402


class FakeClock:
    """Deterministic clock: 1_000, 2_000, 3_000, ... nanoseconds."""

    def __init__(self, start: int = 1_000, step: int = 1_000):
        self.now = start - step
        self.step = step
        self.calls = 0

    def __call__(self) -> Timestamp:
        self.calls += 1
        self.now += self.step
        return Timestamp(self.now)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def holder_store():
    return InMemoryStore("holders")


@pytest.fixture
def package_store():
    return InMemoryStore("packages")


@pytest.fixture
def registry(holder_store):
    return HolderRegistry(holder_store)


@pytest.fixture
def ledger(package_store, registry, fake_clock):
    return PackageLedger(package_store, registry, clock=fake_clock)


@pytest.fixture
async def parties(registry):
    """Sender A, recipient B, couriers C and D."""
    return {
        "sender": await registry.register("Alice Sender"),
        "recipient": await registry.register("Bob Recipient"),
        "courier": await registry.register("Carol Courier"),
        "courier2": await registry.register("Dave Courier"),
    }
