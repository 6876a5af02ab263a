# product_api/handlers.py
import re
import uuid
from typing import Any, Dict, Optional, Union

from .database import ProductStore
from .errors import ApiError, NotFoundError
from .models import ProductIn, _make_product

# Each handler returns its value or an ApiError; the route layer renders both.

Result = Union[Any, ApiError]

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def _parse_positive_int(raw: Optional[str]) -> Optional[int]:
    # Takes the leading integer ("2", "2abc", "2.5" -> 2); anything below 1 is unusable.
    if raw is None:
        return None
    m = _LEADING_INT.match(raw)
    if not m:
        return None
    value = int(m.group(0))
    return value if value > 0 else None


def list_products_logic(
    store: ProductStore,
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Result:
    result = store.snapshot()

    if category:
        result = [p for p in result if p.category == category]

    if search:
        term = search.lower()
        result = [p for p in result if term in p.name.lower()]

    page_n = _parse_positive_int(page) or 1
    limit_n = _parse_positive_int(limit) or len(result)
    start = (page_n - 1) * limit_n
    paginated = result[start:start + limit_n]

    return {
        "total": len(result),
        "page": page_n,
        "limit": limit_n,
        "products": paginated,
    }


def get_product_logic(store: ProductStore, product_id: str) -> Result:
    p = store.get(product_id)
    if p is None:
        return NotFoundError("Product not found")
    return p


def create_product_logic(store: ProductStore, payload: ProductIn) -> Result:
    pid = str(uuid.uuid4())
    return store.add(_make_product(pid, payload))


def update_product_logic(store: ProductStore, product_id: str, payload: ProductIn) -> Result:
    updated = store.replace(product_id, _make_product(product_id, payload))
    if updated is None:
        return NotFoundError("Product not found")
    return updated


def delete_product_logic(store: ProductStore, product_id: str) -> Result:
    deleted = store.remove(product_id)
    if deleted is None:
        return NotFoundError("Product not found")
    return {"message": "Product deleted", "product": deleted}


def product_stats_logic(store: ProductStore) -> Dict[str, Dict[str, int]]:
    return {"countByCategory": store.count_by_category()}
