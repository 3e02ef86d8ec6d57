"""
本文件用于集中定义通用缓存的键格式，以及写操作后批量失效相关键的辅助函数。
"""

from typing import Iterable, Optional

from app.cache.memory_cache import InMemoryCache

ALL_ACCOUNTS = "all_accounts"
ALL_ORDERS = "all_orders"
ALL_PRODUCTS = "all_products"


def account_key(account_id: int) -> str:
    return f"account_{account_id}"


def account_nickname_key(nickname: str) -> str:
    return f"account_nickname_{nickname}"


def order_key(order_id: int) -> str:
    return f"order_{order_id}"


def account_orders_key(account_id: int) -> str:
    return f"orders_account_{account_id}"


def evict_account(cache: InMemoryCache, account_id: int, *nicknames: Optional[str]) -> None:
    cache.remove(ALL_ACCOUNTS)
    cache.remove(account_key(account_id))
    for nickname in nicknames:
        if nickname:
            cache.remove(account_nickname_key(nickname))


def evict_orders(cache: InMemoryCache, orders: Iterable) -> None:
    """
    移除订单相关的缓存键；账户响应内嵌订单列表，所以所属账户的键一并移除
    """
    cache.remove(ALL_ORDERS)
    for order in orders:
        cache.remove(order_key(order.id))
        cache.remove(account_orders_key(order.account_id))
        # 仅在关联已加载时读取昵称，避免在异步会话外触发懒加载
        account = order.__dict__.get("account")
        evict_account(cache, order.account_id, account.nickname if account is not None else None)
