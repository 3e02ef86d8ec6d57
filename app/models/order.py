"""
本文件用于定义 `orders` 表与 `order_product` 关联表的 ORM 模型。
主要对象:
- `order_product`: 订单与商品的多对多关联表
- `Order`: 订单
"""

from datetime import datetime
from typing import List

from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

order_product = Table(
    "order_product",
    Base.metadata,
    Column("order_id", ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True),
    Column("product_id", ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
)


class Order(Base):
    """
    输入:
    - `order_date`: 下单时间
    - `total_price`: 订单总价（非负）
    - `account_id`: 所属账户（必填）

    输出:
    - 数据库 `orders` 表的 ORM 映射对象

    作用:
    - 记录订单及其包含的商品；商品集合通过 `order_product` 关联，无所有权方向
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    order_date: Mapped[datetime] = mapped_column(DateTime, default=datetime.now, nullable=False)
    total_price: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    account_id: Mapped[int] = mapped_column(ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)

    account: Mapped["Account"] = relationship("Account", back_populates="orders")
    products: Mapped[List["Product"]] = relationship("Product", secondary=order_product)

    __table_args__ = (CheckConstraint("total_price >= 0", name="ck_orders_total_price_non_negative"),)

    def __repr__(self) -> str:
        return f"<Order id={self.id} account_id={self.account_id}>"
