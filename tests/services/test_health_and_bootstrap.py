"""Health probes and component wiring."""

from parcel_ledger.config import Settings
from parcel_ledger.infrastructure.memory_store import InMemoryStore
from parcel_ledger.infrastructure.sql_store import SqlKeyValueStore
from parcel_ledger.services.bootstrap import build_components


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_memory_stores(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"holders": "healthy", "packages": "healthy"}


async def test_readiness_reports_unavailable_store(client, components, monkeypatch):
    async def down():
        return False

    monkeypatch.setattr(components.packages, "health_check", down)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["checks"]["packages"] == "unavailable"


async def test_build_components_memory():
    components = await build_components(Settings(storage_backend="memory"))
    assert isinstance(components.holders, InMemoryStore)
    assert components.ledger.registry is components.registry
    assert components.db is None
    await components.close()


async def test_build_components_database_creates_tables():
    components = await build_components(Settings(
        storage_backend="database",
        database_url="sqlite+aiosqlite:///:memory:",
    ))
    try:
        assert isinstance(components.packages, SqlKeyValueStore)
        holder = await components.registry.register("Alice")
        assert await components.registry.lookup(holder.uuid) == holder
    finally:
        await components.close()


async def test_duplicate_policy_flows_from_settings():
    components = await build_components(Settings(
        storage_backend="memory", reject_duplicate_holder_names=False,
    ))
    await components.registry.register("Alice")
    await components.registry.register("Alice")
    assert len(await components.registry.list_all()) == 2


def test_postgres_url_rewritten():
    settings = Settings(database_url="postgresql://u:p@db:5432/ledger")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/ledger"
