"""
Request-body validation for product writes.

Every field is checked on its own so a client sees all problems at once;
the messages come back in field order under ``details``.
"""

import math
from typing import Any, Dict, List

from fastapi import Request

from .errors import ApiError
from .models import ProductIn


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_non_negative_number(value: Any) -> bool:
    # bool is an int subclass, but true/false are not prices
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value) and value >= 0
    except OverflowError:
        # ints beyond float range cannot be stored as a price
        return False


def check_product(payload: Dict[str, Any]) -> List[str]:
    errors = []
    if not _is_non_empty_string(payload.get("name")):
        errors.append("Name is required and must be a non-empty string")
    if not _is_non_empty_string(payload.get("description")):
        errors.append("Description is required and must be a non-empty string")
    if not _is_non_negative_number(payload.get("price")):
        errors.append("Price must be a non-negative number")
    if not _is_non_empty_string(payload.get("category")):
        errors.append("Category is required and must be a non-empty string")
    if not isinstance(payload.get("inStock"), bool):
        errors.append("inStock must be a boolean (true or false)")
    return errors


async def _read_json_object(request: Request) -> Dict[str, Any]:
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


async def validate_product(request: Request) -> ProductIn:
    """FastAPI dependency: the validated body, or a 400 listing every violation."""
    payload = await _read_json_object(request)
    errors = check_product(payload)
    if errors:
        raise ApiError.validation(errors)
    return ProductIn(
        name=payload["name"],
        description=payload["description"],
        price=payload["price"],
        category=payload["category"],
        in_stock=payload["inStock"],
    )
