"""
本文件用于实现订单相关业务：查询（带缓存）、创建/更新（校验账户与商品）、删除，以及按商品分类/价格的过滤查询。
主要类:
- `OrderService`: 订单服务
"""

from datetime import datetime
from typing import List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.cache import keys
from app.cache.memory_cache import InMemoryCache
from app.core.exceptions import InvalidInputError, NotFoundError
from app.core.logger import setup_logger
from app.models.account import Account
from app.models.order import Order
from app.models.product import Product
from app.repositories import AccountRepository, OrderRepository, ProductRepository
from app.schemas.order import OrderPayload

logger = setup_logger("OrderService")


class OrderService:
    def __init__(self, cache: InMemoryCache) -> None:
        self.cache = cache

    async def get_all_orders(self, db: AsyncSession) -> List[Order]:
        if self.cache.contains_key(keys.ALL_ORDERS):
            return self.cache.get(keys.ALL_ORDERS)

        orders = await OrderRepository(db).find_all()
        self.cache.put(keys.ALL_ORDERS, orders)
        return orders

    async def get_order_by_id(self, db: AsyncSession, order_id: int) -> Order:
        key = keys.order_key(order_id)
        if self.cache.contains_key(key):
            return self.cache.get(key)

        order = await OrderRepository(db).find_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order with id {order_id} not found")
        self.cache.put(key, order)
        return order

    async def get_orders_by_account_id(self, db: AsyncSession, account_id: int) -> List[Order]:
        key = keys.account_orders_key(account_id)
        if self.cache.contains_key(key):
            return self.cache.get(key)

        orders = await OrderRepository(db).find_by_account_id(account_id)
        self.cache.put(key, orders)
        return orders

    async def create_order(self, db: AsyncSession, payload: OrderPayload) -> Order:
        """
        输入:
        - `payload`: 订单数据，必须包含 `accountId` 与非空的 `productIds`

        输出:
        - 创建后的订单（含商品）

        作用:
        - 校验账户存在、所有商品 ID 均存在（部分命中视为整体失败），然后保存订单
        """

        if payload.account_id is None:
            raise InvalidInputError("Account ID is required")
        product_ids = self._require_product_ids(payload)

        account = await self._resolve_account(db, payload.account_id)
        products, total = await self._resolve_products(db, product_ids)

        order = Order(
            order_date=payload.order_date or datetime.now(),
            total_price=payload.total_price if payload.total_price is not None else total,
            account_id=account.id,
        )
        order.products = products

        repo = OrderRepository(db)
        await repo.save(order)
        await db.commit()

        saved = await repo.find_by_id(order.id)
        self.cache.remove(keys.ALL_ORDERS)
        self.cache.remove(keys.account_orders_key(account.id))
        keys.evict_account(self.cache, account.id, account.nickname)
        logger.info(f"Order created: id={saved.id}, account_id={account.id}, products={product_ids}")
        return saved

    async def update_order(self, db: AsyncSession, order_id: int, payload: OrderPayload) -> Order:
        """
        更新订单：商品校验规则同创建；传入 `accountId` 时重新校验账户并允许转移订单，未传入时保留原账户
        """
        product_ids = self._require_product_ids(payload)

        repo = OrderRepository(db)
        order = await repo.find_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order with id {order_id} not found")
        previous_account_id = order.account_id
        previous_nickname = order.account.nickname

        if payload.account_id is not None and payload.account_id != order.account_id:
            order.account = await self._resolve_account(db, payload.account_id)

        products, total = await self._resolve_products(db, product_ids)
        order.products = products
        if payload.order_date is not None:
            order.order_date = payload.order_date
        order.total_price = payload.total_price if payload.total_price is not None else total

        await repo.save(order)
        await db.commit()

        saved = await repo.find_by_id(order_id)
        keys.evict_orders(self.cache, [saved])
        if previous_account_id != saved.account_id:
            self.cache.remove(keys.account_orders_key(previous_account_id))
            keys.evict_account(self.cache, previous_account_id, previous_nickname)
        logger.info(f"Order updated: id={order_id}, account_id={saved.account_id}, products={product_ids}")
        return saved

    async def delete_order(self, db: AsyncSession, order_id: int) -> None:
        repo = OrderRepository(db)
        order = await repo.find_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order with id {order_id} not found")

        await repo.delete(order)
        await db.commit()

        keys.evict_orders(self.cache, [order])
        logger.info(f"Order deleted: id={order_id}")

    async def get_orders_by_product_category(self, db: AsyncSession, category: str) -> List[Order]:
        orders = await OrderRepository(db).find_by_product_category(category)
        if not orders:
            raise NotFoundError(f"No orders found with products of category '{category}'")
        return orders

    async def get_orders_by_product_price(self, db: AsyncSession, price: int) -> List[Order]:
        orders = await OrderRepository(db).find_by_product_price_native(price)
        if not orders:
            raise NotFoundError(f"No orders found with products priced {price}")
        return orders

    @staticmethod
    def _require_product_ids(payload: OrderPayload) -> List[int]:
        if not payload.product_ids:
            raise InvalidInputError("Product IDs are required")
        return payload.product_ids

    @staticmethod
    async def _resolve_account(db: AsyncSession, account_id: int) -> Account:
        account = await AccountRepository(db).find_by_id(account_id)
        if account is None:
            raise NotFoundError(f"Account not found with id: {account_id}")
        return account

    @staticmethod
    async def _resolve_products(db: AsyncSession, product_ids: List[int]) -> Tuple[List[Product], int]:
        requested = list(dict.fromkeys(product_ids))
        products = await ProductRepository(db).find_all_by_id(requested)
        if len(products) != len(requested):
            raise NotFoundError("One or more products not found")
        return products, sum(p.price for p in products)

