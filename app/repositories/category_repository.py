"""
本文件用于提供 `Category` 的数据访问。
主要类:
- `CategoryRepository`: 分类仓储
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.category import Category
from app.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Category)

    def _load_options(self) -> list:
        return [selectinload(Category.products)]

    async def find_by_name(self, name: str) -> List[Category]:
        result = await self.session.execute(self._select().where(Category.name == name))
        return list(result.scalars().all())
