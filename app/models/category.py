"""
本文件用于定义 `categories` 表的 ORM 模型。
主要类:
- `Category`: 商品分类（通过名称关联商品的 `category` 字段，只读）
"""

from typing import List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    products: Mapped[List["Product"]] = relationship(
        "Product",
        primaryjoin="foreign(Product.category) == Category.name",
        viewonly=True,
    )
