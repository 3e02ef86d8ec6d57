"""
本文件用于提供进程内的通用键值缓存，缓存服务层的查询结果。
主要类:
- `InMemoryCache`: 字符串键到任意对象的缓存（无过期、无容量上限，依赖调用方在写操作后手动失效）
"""

from threading import Lock
from typing import Any, Dict, Optional

from app.core.logger import setup_logger

logger = setup_logger("InMemoryCache")


class InMemoryCache:
    """
    输入:
    - 形如 `account_1`、`all_orders` 的缓存键与对应的实体/实体列表

    输出:
    - 命中时返回缓存对象，未命中返回 `None`

    作用:
    - 为服务层提供线程安全的读缓存；写操作之后由服务层移除受影响的键
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._data: Dict[str, Any] = {}

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._data.get(key)

    def put(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value
        logger.debug(f"cache put: {key}")

    def contains_key(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def remove(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)
        logger.debug(f"cache remove: {key}")

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
