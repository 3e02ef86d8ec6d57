"""
本文件用于实现商品相关业务：按分类/价格过滤查询、按 ID 查询（类型化商品缓存）、创建/更新、删除。
删除商品时需手动把商品从所有包含它的订单中移除（多对多关联不会随商品级联清理）。
主要类:
- `ProductService`: 商品服务
"""

from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.cache import keys
from app.cache.memory_cache import InMemoryCache
from app.cache.product_cache import ProductCache
from app.core.exceptions import NotFoundError
from app.core.logger import setup_logger
from app.models.product import Product
from app.repositories import AccountRepository, OrderRepository, ProductRepository
from app.schemas.product import ProductPayload

logger = setup_logger("ProductService")


class ProductService:
    def __init__(self, cache: InMemoryCache, product_cache: ProductCache) -> None:
        self.cache = cache
        self.product_cache = product_cache

    async def get_products(
        self,
        db: AsyncSession,
        category: Optional[str] = None,
        price: Optional[int] = None,
    ) -> List[Product]:
        """
        输入:
        - `category`: 分类过滤（可选）
        - `price`: 价格过滤（可选）

        输出:
        - 符合条件的商品列表（可能为空）

        作用:
        - 按“分类+价格 / 仅分类 / 仅价格 / 无过滤”四种情况查询；无过滤时使用缓存
        """

        repo = ProductRepository(db)
        if category is not None and price is not None:
            return await repo.find_by_category_and_price(category, price)
        if category is not None:
            return await repo.find_by_category(category)
        if price is not None:
            return await repo.find_by_price(price)

        if self.cache.contains_key(keys.ALL_PRODUCTS):
            return self.cache.get(keys.ALL_PRODUCTS)
        products = await repo.find_all()
        self.cache.put(keys.ALL_PRODUCTS, products)
        return products

    async def get_product_by_id(self, db: AsyncSession, product_id: int) -> Product:
        cached = self.product_cache.get(product_id)
        if cached is not None:
            return cached

        product = await ProductRepository(db).find_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with id {product_id} not found")
        self.product_cache.put(product)
        return product

    async def save_product(
        self,
        db: AsyncSession,
        payload: ProductPayload,
        product_id: Optional[int] = None,
    ) -> Product:
        product = await self._apply(db, payload, product_id)
        await db.commit()
        saved = await ProductRepository(db).find_by_id(product.id)
        await self._evict(db, saved.id)
        logger.info(f"Product saved: id={saved.id}, name={saved.name}")
        return saved

    async def save_products(self, db: AsyncSession, payloads: Sequence[ProductPayload]) -> List[Product]:
        """
        批量创建商品，任一商品校验失败则整体回滚
        """
        created = []
        for payload in payloads:
            created.append(await self._apply(db, payload, None))
        await db.commit()

        saved = await ProductRepository(db).find_all_by_id([p.id for p in created])
        self.cache.remove(keys.ALL_PRODUCTS)
        logger.info(f"Products created in bulk: count={len(saved)}")
        return saved

    async def delete_product(self, db: AsyncSession, product_id: int) -> None:
        """
        输入:
        - `product_id`: 商品 ID

        输出:
        - 无

        作用:
        - 商品不存在时抛出 NotFoundError；否则先从所有包含该商品的订单中移除它，再删除商品。
          两步在同一事务中提交
        """

        repo = ProductRepository(db)
        product = await repo.find_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with id {product_id} not found")

        orders = await OrderRepository(db).find_by_products_containing(product_id)
        for order in orders:
            order.products = [p for p in order.products if p.id != product_id]
        await db.flush()

        await repo.delete(product)
        await db.commit()

        self.cache.remove(keys.ALL_PRODUCTS)
        self.product_cache.remove(product_id)
        keys.evict_orders(self.cache, orders)
        logger.info(f"Product deleted: id={product_id}, detached from {len(orders)} orders")

    async def _apply(self, db: AsyncSession, payload: ProductPayload, product_id: Optional[int]) -> Product:
        if payload.account_id is not None:
            if await AccountRepository(db).find_by_id(payload.account_id) is None:
                raise NotFoundError(f"Account with id {payload.account_id} not found")

        repo = ProductRepository(db)
        if product_id is None:
            product = Product(**payload.model_dump())
        else:
            product = await repo.find_by_id(product_id)
            if product is None:
                raise NotFoundError(f"Product with id {product_id} not found")
            for field, value in payload.model_dump().items():
                setattr(product, field, value)
        return await repo.save(product)

    async def _evict(self, db: AsyncSession, product_id: int) -> None:
        self.cache.remove(keys.ALL_PRODUCTS)
        self.product_cache.remove(product_id)
        # 订单与账户的响应内嵌商品摘要
        orders = await OrderRepository(db).find_by_products_containing(product_id)
        keys.evict_orders(self.cache, orders)
