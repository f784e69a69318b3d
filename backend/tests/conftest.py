import pytest
from fastapi.testclient import TestClient

from core.config import settings
from db.database import InventoryStore, get_store
from main import app
from schemas.products import ProductCreate


@pytest.fixture
def store():
    return InventoryStore()


@pytest.fixture
def client(store, monkeypatch):
    monkeypatch.setattr(settings, "seed_demo_data", False)
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_product(store):
    def _make(**overrides):
        data = {
            "name": "Wireless Mouse",
            "sku": "ELC-001",
            "quantity": 10,
            "min_stock_level": 5,
            "category": "Electronics",
            "location": "A-1-A",
            "price": "29.99",
        }
        data.update(overrides)
        return store.create_product(ProductCreate(**data))

    return _make
