"""
本文件用于聚合各模块路由，并提供统一的 `api_router` 给主应用注册。
主要对象:
- `api_router`: API 路由聚合器
"""

from fastapi import APIRouter

from app.api.endpoints import accounts, categories, logs, orders, products, visits

api_router = APIRouter()
api_router.include_router(accounts.router)
api_router.include_router(products.router)
api_router.include_router(orders.router)
api_router.include_router(categories.router)
api_router.include_router(logs.router)
api_router.include_router(visits.router)
