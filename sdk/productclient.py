# sdk/productclient.py
from typing import Any, Dict, Optional

import httpx
import requests

API_KEY_HEADER = "x-api-key"


class ProductAPIError(Exception):
    """Non-2xx answer from the Product API, unpacked from its error envelope."""

    def __init__(self, status_code: int, error: str, message: str):
        super().__init__(f"{status_code} {error}: {message}")
        self.status_code = status_code
        self.error = error
        self.message = message


def _unwrap(r) -> Any:
    if r.status_code >= 400:
        try:
            body = r.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        raise ProductAPIError(
            r.status_code,
            body.get("error", "Error"),
            body.get("message", r.text),
        )
    return r.json()


def _product_body(name: str, description: str, price: float, category: str, in_stock: bool) -> Dict[str, Any]:
    return {
        "name": name,
        "description": description,
        "price": price,
        "category": category,
        "inStock": in_stock,
    }


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None,
                 timeout: int = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.api_key = api_key
        self.session = session if session is not None else requests.Session()
        if api_key:
            self.session.headers.update({API_KEY_HEADER: api_key})

    def welcome(self) -> str:
        r = self.session.get(f"{self.base_url}/", timeout=self.timeout)
        if r.status_code >= 400:
            _unwrap(r)
        return r.text

    # Products
    def list_products(self, category: Optional[str] = None, search: Optional[str] = None,
                      page: Optional[int] = None, limit: Optional[int] = None):
        params = {}
        if category:
            params["category"] = category
        if search:
            params["search"] = search
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        r = self.session.get(f"{self.base_url}/api/products", params=params, timeout=self.timeout)
        return _unwrap(r)

    def get_product(self, product_id: str):
        r = self.session.get(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        return _unwrap(r)

    def create_product(self, name: str, description: str, price: float, category: str, in_stock: bool = True):
        r = self.session.post(
            f"{self.base_url}/api/products",
            json=_product_body(name, description, price, category, in_stock),
            timeout=self.timeout,
        )
        return _unwrap(r)

    def update_product(self, product_id: str, name: str, description: str, price: float,
                       category: str, in_stock: bool):
        # the API has no partial updates: every field is sent every time
        r = self.session.put(
            f"{self.base_url}/api/products/{product_id}",
            json=_product_body(name, description, price, category, in_stock),
            timeout=self.timeout,
        )
        return _unwrap(r)

    def delete_product(self, product_id: str):
        r = self.session.delete(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        return _unwrap(r)

    def stats(self) -> Dict[str, int]:
        r = self.session.get(f"{self.base_url}/api/products/stats", timeout=self.timeout)
        return _unwrap(r)["countByCategory"]

    # Async create (used by the concurrency demo)
    async def create_product_async(self, name: str, description: str, price: float, category: str,
                                   in_stock: bool = True, client: Optional[httpx.AsyncClient] = None):
        headers = {API_KEY_HEADER: self.api_key} if self.api_key else {}
        body = _product_body(name, description, price, category, in_stock)
        if client is not None:
            r = await client.post(f"{self.base_url}/api/products", json=body, headers=headers)
            return _unwrap(r)
        async with httpx.AsyncClient(timeout=self.timeout) as ac:
            r = await ac.post(f"{self.base_url}/api/products", json=body, headers=headers)
            return _unwrap(r)
