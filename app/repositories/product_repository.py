"""
本文件用于提供 `Product` 的数据访问，包括按分类/价格的过滤查询。
主要类:
- `ProductRepository`: 商品仓储
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.product import Product
from app.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Product)

    def _load_options(self) -> list:
        return [selectinload(Product.account)]

    async def find_by_category(self, category: str) -> List[Product]:
        result = await self.session.execute(self._select().where(Product.category == category))
        return list(result.scalars().all())

    async def find_by_price(self, price: int) -> List[Product]:
        result = await self.session.execute(self._select().where(Product.price == price))
        return list(result.scalars().all())

    async def find_by_category_and_price(self, category: str, price: int) -> List[Product]:
        stmt = self._select().where(Product.category == category, Product.price == price)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
