"""
warehouse_client.py

A tiny API client for this warehouse inventory backend, for scripts and
integrations (scanners, bots, cron jobs).

What it provides:
- Product lookup/creation
- Stock movements (in/out; out is rejected with 409 when stock is insufficient)
- Low-stock alerts and the report summary

Environment variables expected:
- WAREHOUSE_API_URL: e.g. "http://localhost:8000"

Dependencies:
- requests (pip install requests)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests


class ApiError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class WarehouseApiClient:
    base_url: str
    timeout: float = 30

    def _request(self, method: str, path: str, *, json: Any = None, params: Dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        resp = requests.request(
            method,
            url,
            json=json,
            params=params,
            headers={"Accept": "application/json"},
            timeout=self.timeout,
        )

        if resp.status_code >= 400:
            raise ApiError(f"{method} {path} failed ({resp.status_code}): {resp.text}", resp.status_code)

        if resp.status_code == 204:
            return None
        return resp.json()

    # ----------------------------
    # Products
    # ----------------------------

    def list_products(self, *, q: Optional[str] = None, category: Optional[str] = None) -> Any:
        params = {k: v for k, v in {"q": q, "category": category}.items() if v}
        return self._request("GET", "/api/products/", params=params or None)

    def get_product(self, product_id: str) -> Any:
        return self._request("GET", f"/api/products/{product_id}")

    def create_product(
        self,
        *,
        name: str,
        sku: str,
        category: str,
        location: str,  # "zone-shelf[-bin]", e.g. "A-1-B"
        quantity: int = 0,
        min_stock_level: Optional[int] = None,
        description: Optional[str] = None,
        price: Optional[str] = None,  # decimal string, e.g. "12.99"
    ) -> Any:
        payload: Dict[str, Any] = {
            "name": name,
            "sku": sku,
            "category": category,
            "location": location,
            "quantity": quantity,
            "description": description,
            "price": price,
        }
        if min_stock_level is not None:
            payload["min_stock_level"] = min_stock_level
        return self._request("POST", "/api/products/", json=payload)

    def delete_product(self, product_id: str) -> None:
        return self._request("DELETE", f"/api/products/{product_id}")

    # ----------------------------
    # Movements
    # ----------------------------

    def record_movement(
        self,
        *,
        product_id: str,
        type: str,  # "in" | "out"
        quantity: int,
        notes: Optional[str] = None,
    ) -> Any:
        """
        Calls: POST /api/movements
        Returns {"movement": ..., "product": ...}.
        """
        payload = {
            "product_id": product_id,
            "type": type,
            "quantity": quantity,
            "notes": notes,
        }
        return self._request("POST", "/api/movements", json=payload)

    def list_movements(self, *, q: Optional[str] = None, limit: int = 200) -> Any:
        params: Dict[str, Any] = {"limit": limit}
        if q:
            params["q"] = q
        return self._request("GET", "/api/movements", params=params)

    # ----------------------------
    # Alerts + reports
    # ----------------------------

    def low_stock(self) -> Any:
        return self._request("GET", "/api/alerts/low-stock")

    def report(self) -> Any:
        return self._request("GET", "/api/reports")


def make_client_from_env() -> WarehouseApiClient:
    base_url = os.getenv("WAREHOUSE_API_URL", "").strip()
    if not base_url:
        raise RuntimeError("Missing WAREHOUSE_API_URL")
    return WarehouseApiClient(base_url=base_url)


if __name__ == "__main__":
    client = make_client_from_env()
    for p in client.low_stock():
        print(f"{p['sku']:<10} {p['name']:<30} qty={p['quantity']} min={p['min_stock_level']}")
