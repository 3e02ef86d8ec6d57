"""
本文件用于定义 `accounts` 表的 ORM 模型。
主要类:
- `Account`: 用户账户
"""

from typing import List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


class Account(Base):
    """
    输入:
    - `nickname`/`email`: 全局唯一的昵称与邮箱
    - `first_name`/`last_name`: 姓名

    输出:
    - 数据库 `accounts` 表的 ORM 映射对象

    作用:
    - 账户独占其订单（级联删除）；商品仅弱引用账户，删除账户时商品的 `account_id` 置空
    """

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    nickname: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    orders: Mapped[List["Order"]] = relationship(
        "Order",
        back_populates="account",
        cascade="all, delete-orphan",
    )
    products: Mapped[List["Product"]] = relationship("Product", back_populates="account")

    def __repr__(self) -> str:
        return f"<Account id={self.id} nickname={self.nickname!r}>"
