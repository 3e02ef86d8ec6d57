"""
本文件用于提供仓储层的通用基类，封装基于 `AsyncSession` 的增删改查。
主要类:
- `BaseRepository`: 通用仓储（按主键查询、批量查询、保存、删除）
"""

from typing import Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    输入:
    - `session`: 当前请求的数据库会话
    - `model`: ORM 模型类

    输出:
    - 仓储对象

    作用:
    - 只负责读写，不提交事务；事务边界由服务层控制
    """

    def __init__(self, session: AsyncSession, model: Type[ModelType]) -> None:
        self.session = session
        self.model = model

    def _load_options(self) -> list:
        return []

    def _select(self):
        # populate_existing 保证身份映射中已有的对象也会刷新关联集合
        return (
            select(self.model)
            .options(*self._load_options())
            .execution_options(populate_existing=True)
            .order_by(self.model.id)
        )

    async def find_all(self) -> List[ModelType]:
        result = await self.session.execute(self._select())
        return list(result.scalars().all())

    async def find_by_id(self, obj_id: int) -> Optional[ModelType]:
        result = await self.session.execute(self._select().where(self.model.id == obj_id))
        return result.scalars().first()

    async def find_all_by_id(self, ids: Sequence[int]) -> List[ModelType]:
        if not ids:
            return []
        result = await self.session.execute(self._select().where(self.model.id.in_(list(ids))))
        return list(result.scalars().all())

    async def save(self, obj: ModelType) -> ModelType:
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def delete(self, obj: ModelType) -> None:
        await self.session.delete(obj)
        await self.session.flush()
