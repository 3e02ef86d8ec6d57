"""
本包用于集中导出仓储类，便于服务层直接引用。
"""

from app.repositories.account_repository import AccountRepository
from app.repositories.category_repository import CategoryRepository
from app.repositories.order_repository import OrderRepository
from app.repositories.product_repository import ProductRepository

__all__ = ["AccountRepository", "CategoryRepository", "OrderRepository", "ProductRepository"]
