"""
本包用于集中导出服务层类；实例由 `main.create_app` 统一创建并挂载到 `app.state`。
主要导出:
- `AccountService` / `ProductService` / `OrderService` / `CategoryService`
- `LogService` / `VisitCounterService`
"""

from app.services.account_service import AccountService
from app.services.category_service import CategoryService
from app.services.log_service import LogService
from app.services.order_service import OrderService
from app.services.product_service import ProductService
from app.services.visit_counter_service import VisitCounterService

__all__ = [
    "AccountService",
    "CategoryService",
    "LogService",
    "OrderService",
    "ProductService",
    "VisitCounterService",
]
