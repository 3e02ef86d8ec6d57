"""
本文件用于提供按商品 ID 缓存商品实体的类型化缓存。
主要类:
- `ProductCache`: 商品 ID 到 `Product` 的线程安全缓存
"""

from threading import Lock
from typing import Dict, Optional

from app.core.logger import setup_logger
from app.models.product import Product

logger = setup_logger("ProductCache")


class ProductCache:
    def __init__(self) -> None:
        self._lock = Lock()
        self._products: Dict[int, Product] = {}

    def get(self, product_id: int) -> Optional[Product]:
        logger.debug(f"Get product by id: {product_id}")
        with self._lock:
            return self._products.get(product_id)

    def put(self, product: Optional[Product]) -> None:
        if product is None or product.id is None:
            return
        logger.debug(f"Put product: {product!r}")
        with self._lock:
            self._products[product.id] = product

    def remove(self, product_id: int) -> None:
        logger.debug(f"Remove product: {product_id}")
        with self._lock:
            self._products.pop(product_id, None)

    def size(self) -> int:
        with self._lock:
            return len(self._products)
