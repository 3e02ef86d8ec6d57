import pytest

from app.core.exceptions import NotFoundError
from app.schemas.category import CategoryPayload
from app.services import CategoryService


@pytest.fixture
def category_service():
    return CategoryService()


async def test_category_crud(db, category_service):
    created = await category_service.create_category(db, CategoryPayload(name="books"))
    assert created.id is not None
    assert created.name == "books"

    updated = await category_service.update_category(db, created.id, CategoryPayload(name="ebooks"))
    assert updated.name == "ebooks"
    assert [c.name for c in await category_service.get_all_categories(db)] == ["ebooks"]

    await category_service.delete_category(db, created.id)
    assert await category_service.get_all_categories(db) == []


async def test_category_lists_products_by_name(db, category_service, make_product):
    await make_product("Novel", 15, "books")
    await make_product("Lamp", 30, "home")
    category = await category_service.create_category(db, CategoryPayload(name="books"))

    fetched = await category_service.get_category_by_id(db, category.id)
    assert [p.name for p in fetched.products] == ["Novel"]


async def test_missing_category_raises_not_found(db, category_service):
    with pytest.raises(NotFoundError):
        await category_service.get_category_by_id(db, 1)
    with pytest.raises(NotFoundError):
        await category_service.update_category(db, 1, CategoryPayload(name="x"))
    with pytest.raises(NotFoundError):
        await category_service.delete_category(db, 1)
