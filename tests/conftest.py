import asyncio
import os
import tempfile
from pathlib import Path

import pytest

_TMP_DIR = Path(tempfile.mkdtemp(prefix="store-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR / 'test.db'}"
os.environ["LOG_FILE_PATH"] = str(_TMP_DIR / "store.log")
os.environ["LOG_OUTPUT_DIR"] = str(_TMP_DIR / "generated-logs")
os.environ["LOG_LEVEL"] = "INFO"

from fastapi.testclient import TestClient  # noqa: E402

from app.cache import InMemoryCache, ProductCache  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from app.core.database import AsyncSessionLocal, dispose_engine, drop_db, init_db  # noqa: E402
from app.schemas.account import AccountPayload  # noqa: E402
from app.schemas.order import OrderPayload  # noqa: E402
from app.schemas.product import ProductPayload  # noqa: E402
from app.services import AccountService, OrderService, ProductService  # noqa: E402


async def _reset_schema() -> None:
    await drop_db()
    await init_db()
    await dispose_engine()


@pytest.fixture
async def db():
    await _reset_schema()
    async with AsyncSessionLocal() as session:
        yield session
    await dispose_engine()


@pytest.fixture
def cache():
    return InMemoryCache()


@pytest.fixture
def product_cache():
    return ProductCache()


@pytest.fixture
def account_service(cache, product_cache):
    return AccountService(cache, product_cache)


@pytest.fixture
def product_service(cache, product_cache):
    return ProductService(cache, product_cache)


@pytest.fixture
def order_service(cache):
    return OrderService(cache)


@pytest.fixture
def make_account(db, account_service):
    counter = {"n": 0}

    async def _make(nickname=None, **overrides):
        counter["n"] += 1
        nickname = nickname or f"user{counter['n']}"
        data = {
            "nickname": nickname,
            "first_name": "Ivan",
            "last_name": "Petrov",
            "email": f"{nickname}@example.com",
        }
        data.update(overrides)
        return await account_service.save_account(db, AccountPayload(**data))

    return _make


@pytest.fixture
def make_product(db, product_service):
    async def _make(name="Laptop", price=100, category="electronics", account_id=None):
        payload = ProductPayload(name=name, price=price, category=category, account_id=account_id)
        return await product_service.save_product(db, payload)

    return _make


@pytest.fixture
def make_order(db, order_service):
    async def _make(account_id, product_ids, total_price=None):
        payload = OrderPayload(account_id=account_id, product_ids=product_ids, total_price=total_price)
        return await order_service.create_order(db, payload)

    return _make


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def client():
    asyncio.run(_reset_schema())
    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
