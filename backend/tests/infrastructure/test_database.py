"""Database Session Manager - connect/close lifecycle and error mapping."""

import pytest
from sqlalchemy import select, text
from sqlalchemy.exc import OperationalError

import products_api.infrastructure.database as db_module
from products_api.core.errors import DatabaseError
from products_api.infrastructure.database import (
    DatabaseSessionManager, close_db, get_db, init_db,
)
from products_api.models.product import Product


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.close()


async def test_connect_creates_tables(manager):
    assert await manager.connect() is True
    async with manager.session() as db:
        result = await db.execute(select(Product))
        assert result.scalars().all() == []


async def test_connect_failure_is_logged_not_raised(tmp_path, caplog):
    bad = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path}/missing-dir/products.db",
    )
    try:
        assert await bad.connect() is False
    finally:
        await bad.close()
    assert "Hubo un error al conectar a la DB" in caplog.text


async def test_session_maps_sqlalchemy_errors(manager):
    await manager.connect()
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.http_status == 503
    assert exc_info.value.operation == "execute"


async def test_session_rolls_back_on_error(manager):
    await manager.connect()
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            db.add(Product(name="Mouse", price=10))
            await db.flush()
            raise OperationalError("stmt", {}, Exception("lost"))

    async with manager.session() as db:
        result = await db.execute(select(Product))
        assert result.scalars().all() == []


async def test_health_check(manager):
    await manager.connect()
    assert await manager.health_check() is True


async def test_init_and_close_db(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    created = init_db("sqlite+aiosqlite:///:memory:")
    assert db_module.db_manager is created
    await close_db()
    assert db_module.db_manager is None


async def test_get_db_requires_initialization(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(RuntimeError):
        async for _ in get_db():
            pass
