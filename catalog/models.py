# catalog/models.py
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    # Python attributes in snake_case, JSON keys in camelCase
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductIn(_CamelModel):
    name: str
    description: str
    price: float
    category: str
    in_stock: bool


class Product(_CamelModel):
    id: str
    name: str
    description: str
    price: float
    category: str
    in_stock: bool


class Pagination(_CamelModel):
    current_page: int
    total_pages: int
    total_products: int
    has_next: bool
    has_prev: bool


class ProductPage(_CamelModel):
    products: List[Product]
    pagination: Pagination
