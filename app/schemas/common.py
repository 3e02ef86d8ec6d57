"""
本文件用于定义各请求体/响应体共用的基础模型。
主要类:
- `CamelModel`: 以 camelCase 序列化、同时接受 snake_case 输入的基类
- `AccountBrief`: 账户摘要（不含关联集合）
- `ProductBrief`: 商品摘要（不含关联对象）
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AccountBrief(CamelModel):
    id: int
    nickname: str
    first_name: str
    last_name: str
    email: str


class ProductBrief(CamelModel):
    id: int
    name: str
    price: int
    category: str
