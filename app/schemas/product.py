"""
本文件用于定义商品相关的请求体/响应体数据模型。
主要类:
- `ProductPayload`: 创建/更新商品请求体
- `ProductRead`: 商品响应体（含所属账户摘要）
"""

from typing import Optional

from pydantic import Field

from app.schemas.common import AccountBrief, CamelModel, NonBlankStr, ProductBrief


class ProductPayload(CamelModel):
    name: NonBlankStr
    price: int = Field(gt=0)
    category: NonBlankStr
    account_id: Optional[int] = None


class ProductRead(ProductBrief):
    account_id: Optional[int] = None
    account: Optional[AccountBrief] = None
