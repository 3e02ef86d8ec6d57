"""
本文件用于提供订单相关 API：列表、详情、按账户查询、创建、更新、删除，以及按商品分类/价格的过滤查询。
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, get_order_service
from app.schemas.order import OrderPayload, OrderRead
from app.services import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=List[OrderRead])
async def get_all_orders(
    db: AsyncSession = Depends(get_db),
    service: OrderService = Depends(get_order_service),
):
    return await service.get_all_orders(db)


@router.get("/account/{account_id}", response_model=List[OrderRead])
async def get_orders_by_account(
    account_id: int,
    db: AsyncSession = Depends(get_db),
    service: OrderService = Depends(get_order_service),
):
    return await service.get_orders_by_account_id(db, account_id)


@router.get("/filter/by-category-jpql", response_model=List[OrderRead])
async def get_orders_by_product_category(
    category: str = Query(..., min_length=1),
    db: AsyncSession = Depends(get_db),
    service: OrderService = Depends(get_order_service),
):
    """
    输入:
    - `category`: 商品分类

    输出:
    - 包含该分类商品的订单

    作用:
    - ORM 关联 join 查询；无结果时返回 404
    """

    return await service.get_orders_by_product_category(db, category)


@router.get("/filter/by-price-native", response_model=List[OrderRead])
async def get_orders_by_product_price(
    price: int = Query(...),
    db: AsyncSession = Depends(get_db),
    service: OrderService = Depends(get_order_service),
):
    """
    输入:
    - `price`: 商品价格

    输出:
    - 包含该价格商品的订单

    作用:
    - 原生 SQL 查询；无结果时返回 404
    """

    return await service.get_orders_by_product_price(db, price)


@router.get("/{order_id}", response_model=OrderRead)
async def get_order_by_id(
    order_id: int,
    db: AsyncSession = Depends(get_db),
    service: OrderService = Depends(get_order_service),
):
    return await service.get_order_by_id(db, order_id)


@router.post("", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: OrderPayload,
    db: AsyncSession = Depends(get_db),
    service: OrderService = Depends(get_order_service),
):
    return await service.create_order(db, payload)


@router.put("/{order_id}", response_model=OrderRead)
async def update_order(
    order_id: int,
    payload: OrderPayload,
    db: AsyncSession = Depends(get_db),
    service: OrderService = Depends(get_order_service),
):
    return await service.update_order(db, order_id, payload)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: int,
    db: AsyncSession = Depends(get_db),
    service: OrderService = Depends(get_order_service),
):
    await service.delete_order(db, order_id)
    return None
