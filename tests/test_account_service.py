import pytest

from app.cache import keys
from app.core.exceptions import InvalidInputError, NotFoundError
from app.repositories import AccountRepository
from app.schemas.account import AccountPayload


async def test_get_by_id_after_save_returns_saved_fields(db, account_service, make_account):
    saved = await make_account("alice", first_name="Alice", last_name="Smith")

    fetched = await account_service.get_account_by_id(db, saved.id)

    assert fetched.id == saved.id
    assert fetched.nickname == "alice"
    assert fetched.first_name == "Alice"
    assert fetched.last_name == "Smith"
    assert fetched.email == "alice@example.com"
    assert fetched.orders == []


async def test_get_by_nickname(db, account_service, make_account):
    saved = await make_account("bob")
    fetched = await account_service.get_account_by_nickname(db, "bob")
    assert fetched.id == saved.id

    with pytest.raises(NotFoundError):
        await account_service.get_account_by_nickname(db, "nobody")


async def test_get_missing_account_raises_not_found(db, account_service):
    with pytest.raises(NotFoundError):
        await account_service.get_account_by_id(db, 999)


async def test_duplicate_nickname_is_invalid_input(db, account_service, make_account):
    await make_account("carol")
    with pytest.raises(InvalidInputError):
        await make_account("carol", email="another@example.com")

    accounts = await account_service.get_accounts(db)
    assert [a.nickname for a in accounts] == ["carol"]


async def test_update_account_evicts_old_and_new_nickname(db, account_service, cache, make_account):
    saved = await make_account("dave")
    await account_service.get_account_by_nickname(db, "dave")
    assert cache.contains_key(keys.account_nickname_key("dave"))

    payload = AccountPayload(nickname="david", first_name="David", last_name="Jones", email="david@example.com")
    updated = await account_service.save_account(db, payload, saved.id)

    assert updated.id == saved.id
    assert updated.nickname == "david"
    assert not cache.contains_key(keys.account_nickname_key("dave"))
    with pytest.raises(NotFoundError):
        await account_service.get_account_by_nickname(db, "dave")
    assert (await account_service.get_account_by_nickname(db, "david")).id == saved.id


async def test_update_missing_account_raises_not_found(db, account_service):
    payload = AccountPayload(nickname="ghost", first_name="G", last_name="H", email="ghost@example.com")
    with pytest.raises(NotFoundError):
        await account_service.save_account(db, payload, 404)


async def test_delete_missing_account_never_calls_repository_delete(db, account_service, monkeypatch):
    calls = []

    async def spy_delete(self, obj):
        calls.append(obj)

    monkeypatch.setattr(AccountRepository, "delete", spy_delete)

    with pytest.raises(NotFoundError):
        await account_service.delete_account(db, 12345)
    assert calls == []


async def test_delete_account_removes_its_orders(db, account_service, order_service, make_account, make_product, make_order):
    account = await make_account("erin")
    product = await make_product()
    order = await make_order(account.id, [product.id])

    await account_service.get_account_by_id(db, account.id)
    await account_service.delete_account(db, account.id)

    with pytest.raises(NotFoundError):
        await account_service.get_account_by_id(db, account.id)
    with pytest.raises(NotFoundError):
        await order_service.get_order_by_id(db, order.id)


async def test_repeated_get_by_id_reads_repository_once(db, account_service, make_account, monkeypatch):
    saved = await make_account("frank")
    calls = []
    original = AccountRepository.find_by_id

    async def counting_find_by_id(self, obj_id):
        calls.append(obj_id)
        return await original(self, obj_id)

    monkeypatch.setattr(AccountRepository, "find_by_id", counting_find_by_id)

    first = await account_service.get_account_by_id(db, saved.id)
    second = await account_service.get_account_by_id(db, saved.id)
    assert first is second
    assert calls == [saved.id]

    payload = AccountPayload(nickname="frank", first_name="Frank", last_name="Lee", email="frank@example.com")
    await account_service.save_account(db, payload, saved.id)
    calls.clear()

    refreshed = await account_service.get_account_by_id(db, saved.id)
    assert refreshed.last_name == "Lee"
    assert calls == [saved.id]
