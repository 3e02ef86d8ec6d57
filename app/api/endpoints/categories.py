"""
本文件用于提供分类相关 API：列表、详情、创建、更新、删除。
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_category_service, get_db
from app.schemas.category import CategoryPayload, CategoryRead
from app.services import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=List[CategoryRead])
async def get_all_categories(
    db: AsyncSession = Depends(get_db),
    service: CategoryService = Depends(get_category_service),
):
    return await service.get_all_categories(db)


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category_by_id(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    service: CategoryService = Depends(get_category_service),
):
    return await service.get_category_by_id(db, category_id)


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: CategoryPayload,
    db: AsyncSession = Depends(get_db),
    service: CategoryService = Depends(get_category_service),
):
    return await service.create_category(db, payload)


@router.put("/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: int,
    payload: CategoryPayload,
    db: AsyncSession = Depends(get_db),
    service: CategoryService = Depends(get_category_service),
):
    return await service.update_category(db, category_id, payload)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    service: CategoryService = Depends(get_category_service),
):
    await service.delete_category(db, category_id)
    return None
