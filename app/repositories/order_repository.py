"""
本文件用于提供 `Order` 的数据访问。
主要类:
- `OrderRepository`: 订单仓储（含按账户、按商品、按商品分类/价格的查询）
"""

from typing import List

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.order import Order
from app.models.product import Product
from app.repositories.base import BaseRepository

_ORDER_IDS_BY_PRODUCT_PRICE_SQL = text(
    """
    SELECT DISTINCT o.id
    FROM orders o
    JOIN order_product op ON op.order_id = o.id
    JOIN products p ON p.id = op.product_id
    WHERE p.price = :price
    """
)


class OrderRepository(BaseRepository[Order]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Order)

    def _load_options(self) -> list:
        return [selectinload(Order.products), selectinload(Order.account)]

    async def find_by_account_id(self, account_id: int) -> List[Order]:
        result = await self.session.execute(self._select().where(Order.account_id == account_id))
        return list(result.scalars().all())

    async def find_by_products_containing(self, product_id: int) -> List[Order]:
        stmt = self._select().where(Order.products.any(Product.id == product_id))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_product_category(self, category: str) -> List[Order]:
        """
        基于 ORM 关联的 join 查询：包含指定分类商品的订单
        """
        stmt = self._select().join(Order.products).where(Product.category == category).distinct()
        result = await self.session.execute(stmt)
        return list(result.scalars().unique().all())

    async def find_by_product_price_native(self, price: int) -> List[Order]:
        """
        基于原生 SQL（直接使用表名/列名）的查询：包含指定价格商品的订单
        """
        rows = await self.session.execute(_ORDER_IDS_BY_PRODUCT_PRICE_SQL, {"price": price})
        order_ids = [row[0] for row in rows]
        return await self.find_all_by_id(order_ids)
