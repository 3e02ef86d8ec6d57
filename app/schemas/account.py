"""
本文件用于定义账户相关的请求体/响应体数据模型。
主要类:
- `AccountPayload`: 创建/更新账户请求体
- `AccountRead`: 账户响应体（含订单）
"""

from typing import Annotated, List

from pydantic import EmailStr, StringConstraints

from app.schemas.common import AccountBrief, CamelModel
from app.schemas.order import OrderRead


class AccountPayload(CamelModel):
    nickname: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
    first_name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
    last_name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
    email: EmailStr


class AccountRead(AccountBrief):
    orders: List[OrderRead] = []
