"""
本文件用于定义分类相关的请求体/响应体数据模型。
"""

from typing import List

from app.schemas.common import CamelModel, NonBlankStr, ProductBrief


class CategoryPayload(CamelModel):
    name: NonBlankStr


class CategoryRead(CamelModel):
    id: int
    name: str
    products: List[ProductBrief] = []
