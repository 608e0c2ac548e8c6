"""Service test fixtures — SQLite-backed stores + FastAPI test client.

Invariants:
    - Every SQL test gets a fresh in-memory SQLite database
    - client talks to an app whose components are attached directly,
      because ASGITransport does not run the lifespan

Design Decisions:
    - SQLite in-memory: fast, no external dependency, same SqlKeyValueStore code path as prod
"""

import pytest
from httpx import ASGITransport, AsyncClient

from parcel_ledger.config import Settings
from parcel_ledger.db.session import create_schema
from parcel_ledger.infrastructure.database import DatabaseSessionManager
from parcel_ledger.infrastructure.memory_store import InMemoryStore
from parcel_ledger.infrastructure.sql_store import SqlKeyValueStore
from parcel_ledger.main import attach_components, create_app
from parcel_ledger.models import HolderRecord, PackageRecord
from parcel_ledger.services.bootstrap import wire_components


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await create_schema(manager.engine)
    yield manager
    await manager.dispose()


@pytest.fixture
def sql_holder_store(db_manager):
    return SqlKeyValueStore(db_manager, HolderRecord)


@pytest.fixture
def sql_package_store(db_manager):
    return SqlKeyValueStore(db_manager, PackageRecord)


@pytest.fixture
def components():
    return wire_components(InMemoryStore("holders"), InMemoryStore("packages"))


@pytest.fixture
async def client(components):
    """FastAPI test client backed by in-memory stores."""
    app = create_app(Settings(storage_backend="memory"))
    attach_components(app, components)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
