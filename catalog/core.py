import math
import re
import uuid
from typing import Optional, Tuple

from .models import Pagination, Product, ProductIn

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """
    Read the leading integer of a query value ("2", "2abc" -> 2). Missing,
    non-numeric, zero and negative values all fall back to ``default``.
    """
    if raw is None:
        return default
    m = _LEADING_INT.match(raw)
    if not m:
        return default
    value = int(m.group(1))
    return value if value > 0 else default


def page_bounds(page: int, limit: int) -> Tuple[int, int]:
    start = (page - 1) * limit
    return start, start + limit


def make_pagination(page: int, limit: int, total: int) -> Pagination:
    start, end = page_bounds(page, limit)
    return Pagination(
        current_page=page,
        total_pages=math.ceil(total / limit),
        total_products=total,
        has_next=end < total,
        has_prev=start > 0,
    )


def new_product_id() -> str:
    return uuid.uuid4().hex


def _make_product(product_id: str, p: ProductIn) -> Product:
    return Product(
        id=product_id,
        name=p.name,
        description=p.description,
        price=float(p.price),
        category=p.category,
        in_stock=bool(p.in_stock),
    )
