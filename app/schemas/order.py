"""
本文件用于定义订单相关的请求体/响应体数据模型。
主要类:
- `OrderPayload`: 创建/更新订单请求体（`productIds` 用于选择商品，不落库）
- `OrderRead`: 订单响应体（含商品摘要）
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.schemas.common import CamelModel, ProductBrief


class OrderPayload(CamelModel):
    order_date: Optional[datetime] = None
    total_price: Optional[float] = Field(default=None, ge=0)
    account_id: Optional[int] = None
    product_ids: Optional[List[int]] = None


class OrderRead(CamelModel):
    id: int
    order_date: datetime
    total_price: float
    account_id: int
    products: List[ProductBrief] = []
