# product_api/database.py
import threading
from collections import Counter
from typing import Dict, List, Optional

from .models import Product

# This file holds the in-memory product store and its lock.

SEED_PRODUCTS: List[Dict] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


class ProductStore:
    """Ordered collection of products; every access goes through one lock."""

    def __init__(self, seed: bool = True):
        self._lock = threading.Lock()
        self._products: List[Product] = []
        if seed:
            self._products = [Product.model_validate(p) for p in SEED_PRODUCTS]

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _index_of(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p.id == product_id:
                return i
        return -1

    def snapshot(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def get(self, product_id: str) -> Optional[Product]:
        with self._lock:
            i = self._index_of(product_id)
            return self._products[i] if i != -1 else None

    def add(self, product: Product) -> Product:
        with self._lock:
            self._products.append(product)
            return product

    def replace(self, product_id: str, product: Product) -> Optional[Product]:
        """Swap the record stored under product_id; None if there is none."""
        with self._lock:
            i = self._index_of(product_id)
            if i == -1:
                return None
            self._products[i] = product
            return product

    def remove(self, product_id: str) -> Optional[Product]:
        with self._lock:
            i = self._index_of(product_id)
            if i == -1:
                return None
            return self._products.pop(i)

    def count_by_category(self) -> Dict[str, int]:
        with self._lock:
            return dict(Counter(p.category for p in self._products))
