"""API test fixtures - async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so readiness probes see the test engine
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

import products_api.infrastructure.database as db_module
from products_api.db.base import Base
from products_api.infrastructure.database import get_db, DatabaseSessionManager
from products_api.main import app
from products_api.models.product import Product


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def store_calls(client):
    """Swap get_db for a recorder: any handler that reaches the store is logged."""
    calls = []

    async def recording_get_db():
        calls.append("get_db")
        raise AssertionError("store must not be reached")
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = recording_get_db
    yield calls
    app.dependency_overrides.clear()


@pytest.fixture
async def seed_product(test_db):
    """Insert one available product directly into the test DB."""
    product = Product(name="Monitor curvo", price=300.0)
    test_db.add(product)
    await test_db.commit()
    await test_db.refresh(product)
    return product
