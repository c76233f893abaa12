# sdk/pycatalog.py
from typing import Any, Dict, List, Optional

import requests


class CatalogAPIError(Exception):
    def __init__(self, status_code: int, message: str, details: Optional[List[str]] = None):
        self.status_code = status_code
        self.message = message
        self.details = details or []
        super().__init__(f"HTTP {status_code}: {message}")


class CatalogClient:
    """
    Thin client for the catalog API.

    ``session`` can be any requests-compatible session; tests pass a
    FastAPI TestClient so no server is needed.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        api_key: Optional[str] = None,
        api_key_header: str = "X-API-Key",
        timeout: int = 10,
        session: Any = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        if api_key:
            self.session.headers.update({api_key_header: api_key})

    def _check(self, r) -> Any:
        if r.status_code >= 400:
            try:
                body = r.json()
            except ValueError:
                body = {"error": r.text}
            raise CatalogAPIError(r.status_code, body.get("error", ""), body.get("details"))
        return r.json()

    @staticmethod
    def _product_body(name: str, description: str, price: float, category: str, in_stock: bool) -> Dict[str, Any]:
        return {
            "name": name,
            "description": description,
            "price": price,
            "category": category,
            "inStock": in_stock,
        }

    def greeting(self) -> str:
        r = self.session.get(f"{self.base_url}/", timeout=self.timeout)
        if r.status_code >= 400:
            self._check(r)
        return r.text

    # Products
    def list_products(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        params = {}
        if category:
            params["category"] = category
        if search:
            params["search"] = search
        if page is not None:
            params["page"] = str(page)
        if limit is not None:
            params["limit"] = str(limit)
        r = self.session.get(f"{self.base_url}/api/products", params=params, timeout=self.timeout)
        return self._check(r)

    def get_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.get(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        return self._check(r)

    def create_product(self, name: str, description: str, price: float, category: str, in_stock: bool = True):
        r = self.session.post(
            f"{self.base_url}/api/products",
            json=self._product_body(name, description, price, category, in_stock),
            timeout=self.timeout,
        )
        return self._check(r)

    def update_product(
        self, product_id: str, name: str, description: str, price: float, category: str, in_stock: bool
    ) -> Dict[str, Any]:
        r = self.session.put(
            f"{self.base_url}/api/products/{product_id}",
            json=self._product_body(name, description, price, category, in_stock),
            timeout=self.timeout,
        )
        return self._check(r)

    def delete_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.delete(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        return self._check(r)
