import logging
from typing import Optional

from .core import (
    DEFAULT_LIMIT, DEFAULT_PAGE, _make_product, make_pagination,
    new_product_id, page_bounds, parse_positive_int
)
from .database import ProductStore
from .errors import ApiError
from .models import Product, ProductIn, ProductPage

logger = logging.getLogger(__name__)

# This file contains the logic behind the product endpoints.

PRODUCT_NOT_FOUND = "Product not found"


async def list_products_logic(
    store: ProductStore,
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> ProductPage:
    async with store.lock:
        result = store.list()

    if category:
        result = [p for p in result if p.category == category]

    if search:
        term = search.lower()
        result = [p for p in result if term in p.name.lower()]

    page_num = parse_positive_int(page, DEFAULT_PAGE)
    page_size = parse_positive_int(limit, DEFAULT_LIMIT)
    start, end = page_bounds(page_num, page_size)

    return ProductPage(
        products=result[start:end],
        pagination=make_pagination(page_num, page_size, len(result)),
    )


async def get_product_logic(store: ProductStore, product_id: str) -> Product:
    async with store.lock:
        p = store.find_by_id(product_id)
    if p is None:
        raise ApiError.not_found(PRODUCT_NOT_FOUND)
    return p


async def create_product_logic(store: ProductStore, payload: ProductIn) -> Product:
    product = _make_product(new_product_id(), payload)
    async with store.lock:
        store.insert(product)
    logger.info("created product %s (%s)", product.id, product.name)
    return product


async def update_product_logic(store: ProductStore, product_id: str, payload: ProductIn) -> Product:
    async with store.lock:
        idx = store.index_of(product_id)
        if idx is None:
            raise ApiError.not_found(PRODUCT_NOT_FOUND)
        product = _make_product(product_id, payload)
        store.replace_at(idx, product)
    logger.info("updated product %s", product_id)
    return product


async def delete_product_logic(store: ProductStore, product_id: str) -> Product:
    async with store.lock:
        idx = store.index_of(product_id)
        if idx is None:
            raise ApiError.not_found(PRODUCT_NOT_FOUND)
        removed = store.remove_at(idx)
    logger.info("deleted product %s", product_id)
    return removed
