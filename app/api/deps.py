"""
本文件用于提供 FastAPI 依赖注入的集中出口：数据库会话与挂载在 `app.state` 上的服务实例。
主要对象:
- `get_db`: 数据库会话依赖注入生成器
- `get_*_service`: 从应用状态中取出对应服务
"""

from fastapi import Request

from app.core.database import get_db
from app.services import (
    AccountService,
    CategoryService,
    LogService,
    OrderService,
    ProductService,
    VisitCounterService,
)


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service


def get_category_service(request: Request) -> CategoryService:
    return request.app.state.category_service


def get_log_service(request: Request) -> LogService:
    return request.app.state.log_service


def get_visit_counter(request: Request) -> VisitCounterService:
    return request.app.state.visit_counter


__all__ = [
    "get_account_service",
    "get_category_service",
    "get_db",
    "get_log_service",
    "get_order_service",
    "get_product_service",
    "get_visit_counter",
]
