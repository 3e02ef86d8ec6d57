"""
本文件用于实现分类的增删改查（无缓存，直接读写数据库）。
主要类:
- `CategoryService`: 分类服务
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.core.logger import setup_logger
from app.models.category import Category
from app.repositories import CategoryRepository
from app.schemas.category import CategoryPayload

logger = setup_logger("CategoryService")


class CategoryService:
    async def get_all_categories(self, db: AsyncSession) -> List[Category]:
        return await CategoryRepository(db).find_all()

    async def get_category_by_id(self, db: AsyncSession, category_id: int) -> Category:
        category = await CategoryRepository(db).find_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category with id {category_id} not found")
        return category

    async def create_category(self, db: AsyncSession, payload: CategoryPayload) -> Category:
        repo = CategoryRepository(db)
        category = await repo.save(Category(name=payload.name))
        await db.commit()
        logger.info(f"Category created: id={category.id}, name={category.name}")
        return await repo.find_by_id(category.id)

    async def update_category(self, db: AsyncSession, category_id: int, payload: CategoryPayload) -> Category:
        repo = CategoryRepository(db)
        category = await self.get_category_by_id(db, category_id)
        category.name = payload.name
        await repo.save(category)
        await db.commit()
        logger.info(f"Category updated: id={category_id}, name={payload.name}")
        return await repo.find_by_id(category_id)

    async def delete_category(self, db: AsyncSession, category_id: int) -> None:
        repo = CategoryRepository(db)
        category = await self.get_category_by_id(db, category_id)
        await repo.delete(category)
        await db.commit()
        logger.info(f"Category deleted: id={category_id}")
