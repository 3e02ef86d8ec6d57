"""
本文件用于提供异步数据库引擎与会话的惰性初始化，并为路由提供依赖注入会话。
主要函数:
- `get_engine`: 懒加载创建 `AsyncEngine`
- `get_sessionmaker`: 懒加载创建 `async_sessionmaker`
- `AsyncSessionLocal`: 获取新的 `AsyncSession`
- `init_db`: 创建数据库表结构
- `get_db`: FastAPI 依赖注入会话生成器
"""

from __future__ import annotations

from typing import Optional

from fastapi import HTTPException
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.config import get_settings
from app.core.logger import logger

_engine: Optional[AsyncEngine] = None
_sessionmaker: Optional[async_sessionmaker] = None


class Base(DeclarativeBase):
    pass


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is not None:
        return _engine

    settings = get_settings()
    if not (settings.DATABASE_URL or "").strip():
        raise RuntimeError("未配置 DATABASE_URL，数据库功能不可用")

    is_sqlite = "sqlite" in settings.DATABASE_URL
    engine_kwargs = {"echo": settings.DB_ECHO}
    if not is_sqlite:
        engine_kwargs.update(pool_size=20, max_overflow=10)

    _engine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)

    # SQLite 默认不校验外键，且需要 WAL 模式提高并发稳定性
    if is_sqlite:
        @event.listens_for(_engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA synchronous=NORMAL")
            cursor.close()

    return _engine


def get_sessionmaker() -> async_sessionmaker:
    global _sessionmaker
    if _sessionmaker is not None:
        return _sessionmaker

    _sessionmaker = async_sessionmaker(bind=get_engine(), class_=AsyncSession, expire_on_commit=False)
    return _sessionmaker


def AsyncSessionLocal() -> AsyncSession:
    return get_sessionmaker()()


def _import_models() -> None:
    from app.models.account import Account  # noqa: F401
    from app.models.category import Category  # noqa: F401
    from app.models.order import Order, order_product  # noqa: F401
    from app.models.product import Product  # noqa: F401


async def init_db() -> None:
    """
    输入:
    - 无

    输出:
    - 无

    作用:
    - 初始化数据库表结构（根据 ORM 模型创建表）
    """

    _import_models()
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db() -> None:
    _import_models()
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def check_db_connection(verbose: bool = True) -> bool:
    """
    检查数据库连接是否可用
    """
    try:
        async with AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
        return True
    except Exception as e:
        if verbose:
            logger.warning(f"数据库连接检查失败: {e}")
        return False


async def dispose_engine() -> None:
    """
    释放数据库引擎的连接池（应用退出时调用）
    """
    global _engine, _sessionmaker
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _sessionmaker = None


async def get_db():
    """
    输入:
    - 无

    输出:
    - 依赖注入可用的 `AsyncSession` 生成器

    作用:
    - 为 FastAPI 路由提供数据库会话，并保证请求结束后自动释放
    """

    if not await check_db_connection(verbose=False):
        raise HTTPException(status_code=503, detail="数据库连接失败，请检查 DATABASE_URL 配置。")

    async with AsyncSessionLocal() as session:
        yield session
