"""
本包用于提供进程内缓存组件，实例由应用组装根（`main.create_app`）创建并注入服务层。
"""

from app.cache.memory_cache import InMemoryCache
from app.cache.product_cache import ProductCache

__all__ = ["InMemoryCache", "ProductCache"]
