"""
本文件用于提供 `Account` 的数据访问。
主要类:
- `AccountRepository`: 账户仓储
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.account import Account
from app.models.order import Order
from app.repositories.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Account)

    def _load_options(self) -> list:
        return [
            selectinload(Account.orders).selectinload(Order.products),
            selectinload(Account.products),
        ]

    async def find_by_nickname(self, nickname: str) -> Optional[Account]:
        result = await self.session.execute(self._select().where(Account.nickname == nickname))
        return result.scalars().first()
