"""
本文件用于统计 API 访问次数（进程内计数，重启后清零）。
主要类:
- `VisitCounterService`: 线程安全的字符串键计数器
"""

from threading import Lock
from types import MappingProxyType
from typing import Dict, Mapping

from app.core.exceptions import InvalidInputError


class VisitCounterService:
    def __init__(self) -> None:
        self._lock = Lock()
        self._counters: Dict[str, int] = {}

    def increment(self, key: str) -> int:
        """
        输入:
        - `key`: 计数键（如 general/GET/POST）

        输出:
        - 自增后的计数

        作用:
        - 键不存在时从 0 开始计数，原子地加一
        """

        if key is None:
            raise InvalidInputError("Counter key must not be None")
        with self._lock:
            value = self._counters.get(key, 0) + 1
            self._counters[key] = value
            return value

    def get_count(self, key: str) -> int:
        if key is None:
            raise InvalidInputError("Counter key must not be None")
        with self._lock:
            return self._counters.get(key, 0)

    def get_all(self) -> Mapping[str, int]:
        with self._lock:
            return MappingProxyType(dict(self._counters))
