"""
本文件用于提供商品相关 API：按分类/价格过滤的列表、详情、创建、批量创建、更新、删除。
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, get_product_service
from app.schemas.product import ProductPayload, ProductRead
from app.services import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=List[ProductRead])
async def get_products(
    category: Optional[str] = None,
    price: Optional[int] = None,
    db: AsyncSession = Depends(get_db),
    service: ProductService = Depends(get_product_service),
):
    """
    输入:
    - `category`: 分类（可选）
    - `price`: 价格（可选）

    输出:
    - 商品列表

    作用:
    - 按条件过滤商品；结果为空时返回 404
    """

    products = await service.get_products(db, category, price)
    if not products:
        raise HTTPException(status_code=404, detail="No products found matching the criteria")
    return products


@router.post("/bulk", response_model=List[ProductRead], status_code=status.HTTP_201_CREATED)
async def create_products_bulk(
    payloads: List[ProductPayload],
    db: AsyncSession = Depends(get_db),
    service: ProductService = Depends(get_product_service),
):
    return await service.save_products(db, payloads)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product_by_id(
    product_id: int,
    db: AsyncSession = Depends(get_db),
    service: ProductService = Depends(get_product_service),
):
    return await service.get_product_by_id(db, product_id)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: ProductPayload,
    db: AsyncSession = Depends(get_db),
    service: ProductService = Depends(get_product_service),
):
    return await service.save_product(db, payload)


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: int,
    payload: ProductPayload,
    db: AsyncSession = Depends(get_db),
    service: ProductService = Depends(get_product_service),
):
    return await service.save_product(db, payload, product_id)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    db: AsyncSession = Depends(get_db),
    service: ProductService = Depends(get_product_service),
):
    """
    删除商品，并将其从所有订单中移除
    """
    await service.delete_product(db, product_id)
    return None
