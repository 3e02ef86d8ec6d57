"""
本文件用于实现账户相关业务：查询（带缓存）、创建/更新、删除（含订单级联清理）。
主要类:
- `AccountService`: 账户服务
"""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.cache import keys
from app.cache.memory_cache import InMemoryCache
from app.cache.product_cache import ProductCache
from app.core.exceptions import InvalidInputError, NotFoundError
from app.core.logger import setup_logger
from app.models.account import Account
from app.repositories import AccountRepository
from app.schemas.account import AccountPayload

logger = setup_logger("AccountService")


class AccountService:
    """
    输入:
    - `cache`: 进程级通用缓存
    - `product_cache`: 商品缓存（商品响应内嵌所属账户，账户变更后需一并失效）

    输出:
    - 账户服务对象

    作用:
    - 读路径先查缓存，未命中再查库并回填；写路径提交后移除受影响的缓存键
    """

    def __init__(self, cache: InMemoryCache, product_cache: ProductCache) -> None:
        self.cache = cache
        self.product_cache = product_cache

    async def get_accounts(self, db: AsyncSession) -> List[Account]:
        if self.cache.contains_key(keys.ALL_ACCOUNTS):
            return self.cache.get(keys.ALL_ACCOUNTS)

        accounts = await AccountRepository(db).find_all()
        self.cache.put(keys.ALL_ACCOUNTS, accounts)
        return accounts

    async def get_account_by_id(self, db: AsyncSession, account_id: int) -> Account:
        key = keys.account_key(account_id)
        if self.cache.contains_key(key):
            return self.cache.get(key)

        account = await AccountRepository(db).find_by_id(account_id)
        if account is None:
            raise NotFoundError(f"Account with id {account_id} not found")
        self.cache.put(key, account)
        return account

    async def get_account_by_nickname(self, db: AsyncSession, nickname: str) -> Account:
        key = keys.account_nickname_key(nickname)
        if self.cache.contains_key(key):
            return self.cache.get(key)

        account = await AccountRepository(db).find_by_nickname(nickname)
        if account is None:
            raise NotFoundError(f"Account with nickname '{nickname}' not found")
        self.cache.put(key, account)
        return account

    async def save_account(
        self,
        db: AsyncSession,
        payload: AccountPayload,
        account_id: Optional[int] = None,
    ) -> Account:
        """
        输入:
        - `payload`: 账户数据
        - `account_id`: 为空时创建，否则更新已有账户

        输出:
        - 保存后的账户（含订单）

        作用:
        - 创建或更新账户；昵称/邮箱冲突视为非法输入。更新时新旧昵称对应的缓存键都会被移除
        """

        repo = AccountRepository(db)
        old_nickname: Optional[str] = None
        if account_id is None:
            account = Account(**payload.model_dump())
        else:
            account = await repo.find_by_id(account_id)
            if account is None:
                raise NotFoundError(f"Account with id {account_id} not found")
            old_nickname = account.nickname
            for field, value in payload.model_dump().items():
                setattr(account, field, value)

        try:
            await repo.save(account)
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise InvalidInputError("Account with the same nickname or email already exists")

        saved = await repo.find_by_id(account.id)
        keys.evict_account(self.cache, saved.id, saved.nickname, old_nickname)
        self._evict_products(p.id for p in saved.products)
        logger.info(f"Account saved: id={saved.id}, nickname={saved.nickname}")
        return saved

    async def delete_account(self, db: AsyncSession, account_id: int) -> None:
        """
        删除账户：账户不存在时抛出 NotFoundError；先清空订单集合（级联删除订单），再删除账户本身
        """
        repo = AccountRepository(db)
        account = await repo.find_by_id(account_id)
        if account is None:
            raise NotFoundError(f"Account with id {account_id} not found")

        orders = list(account.orders)
        product_ids = [p.id for p in account.products]
        account.orders.clear()
        await repo.delete(account)
        await db.commit()

        keys.evict_account(self.cache, account_id, account.nickname)
        keys.evict_orders(self.cache, orders)
        self._evict_products(product_ids)
        logger.info(f"Account deleted: id={account_id}, orders removed={len(orders)}")

    def _evict_products(self, product_ids) -> None:
        # 商品响应内嵌所属账户摘要
        self.cache.remove(keys.ALL_PRODUCTS)
        for product_id in product_ids:
            self.product_cache.remove(product_id)
