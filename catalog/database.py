import asyncio
from typing import Iterable, List, Optional

from fastapi import Request

from .models import Product

# This file holds the in-memory product store and its concurrency lock.

SEED_PRODUCTS = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "in_stock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "in_stock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "in_stock": False,
    },
]


def seed_products() -> List[Product]:
    return [Product(**p) for p in SEED_PRODUCTS]


class ProductStore:
    """
    Ordered in-memory collection of products.

    Order is insertion order; replace_at keeps a product's position and
    remove_at drops exactly one element. Callers hold ``lock`` around any
    lookup that is followed by a mutation so the position they looked up is
    still valid when they use it.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = []
        self.lock = asyncio.Lock()
        for p in products or []:
            self.insert(p)

    def __len__(self) -> int:
        return len(self._products)

    def list(self) -> List[Product]:
        return list(self._products)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        for p in self._products:
            if p.id == product_id:
                return p
        return None

    def index_of(self, product_id: str) -> Optional[int]:
        for i, p in enumerate(self._products):
            if p.id == product_id:
                return i
        return None

    def insert(self, product: Product) -> None:
        if self.index_of(product.id) is not None:
            raise ValueError(f"duplicate product id: {product.id}")
        self._products.append(product)

    def replace_at(self, position: int, product: Product) -> None:
        if self._products[position].id != product.id:
            raise ValueError("replace_at cannot change a product's id")
        self._products[position] = product

    def remove_at(self, position: int) -> Product:
        return self._products.pop(position)


def get_store(request: Request) -> ProductStore:
    return request.app.state.store
