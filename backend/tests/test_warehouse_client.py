import pytest

import warehouse_client
from warehouse_client import ApiError, WarehouseApiClient, make_client_from_env


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        return self._payload


@pytest.fixture
def api():
    return WarehouseApiClient(base_url="http://warehouse.local/")


def test_record_movement_posts_payload(api, monkeypatch):
    seen = {}

    def fake_request(method, url, **kwargs):
        seen.update(method=method, url=url, **kwargs)
        return FakeResponse(201, {"movement": {"quantity": 3}, "product": {"quantity": 7}})

    monkeypatch.setattr(warehouse_client.requests, "request", fake_request)

    out = api.record_movement(product_id="abc", type="out", quantity=3, notes="Order #1")

    assert seen["method"] == "POST"
    assert seen["url"] == "http://warehouse.local/api/movements"
    assert seen["json"] == {"product_id": "abc", "type": "out", "quantity": 3, "notes": "Order #1"}
    assert out["product"]["quantity"] == 7


def test_error_status_raises_api_error(api, monkeypatch):
    monkeypatch.setattr(
        warehouse_client.requests,
        "request",
        lambda method, url, **kw: FakeResponse(409, None, '{"detail":"Insufficient stock"}'),
    )
    with pytest.raises(ApiError) as exc:
        api.record_movement(product_id="abc", type="out", quantity=99)
    assert exc.value.status_code == 409
    assert "Insufficient stock" in str(exc.value)


def test_no_content_returns_none(api, monkeypatch):
    monkeypatch.setattr(
        warehouse_client.requests, "request", lambda method, url, **kw: FakeResponse(204)
    )
    assert api.delete_product("abc") is None


def test_list_products_drops_empty_filters(api, monkeypatch):
    seen = {}

    def fake_request(method, url, **kwargs):
        seen.update(url=url, params=kwargs.get("params"))
        return FakeResponse(200, [])

    monkeypatch.setattr(warehouse_client.requests, "request", fake_request)

    api.list_products()
    assert seen["params"] is None
    assert seen["url"] == "http://warehouse.local/api/products/"

    api.list_products(q="drill")
    assert seen["params"] == {"q": "drill"}


def test_make_client_from_env(monkeypatch):
    monkeypatch.delenv("WAREHOUSE_API_URL", raising=False)
    with pytest.raises(RuntimeError):
        make_client_from_env()

    monkeypatch.setenv("WAREHOUSE_API_URL", " http://localhost:8000 ")
    assert make_client_from_env().base_url == "http://localhost:8000"


@pytest.fixture
def recorded(monkeypatch):
    seen = []

    def fake_request(method, url, **kwargs):
        seen.append({"method": method, "url": url, **kwargs})
        return FakeResponse(200, {"ok": True})

    monkeypatch.setattr(warehouse_client.requests, "request", fake_request)
    return seen


def test_create_product_omits_unset_min_stock_level(api, recorded):
    api.create_product(name="Drill", sku="TLS-001", category="Tools", location="B-1", quantity=4)
    api.create_product(name="Bolts", sku="HRD-001", category="Hardware", location="A-2-A", min_stock_level=0, price="15.99")

    first, second = recorded
    assert first["method"] == "POST"
    assert first["url"] == "http://warehouse.local/api/products/"
    assert "min_stock_level" not in first["json"]
    assert first["json"]["quantity"] == 4
    assert second["json"]["min_stock_level"] == 0
    assert second["json"]["price"] == "15.99"


def test_read_helpers_hit_expected_routes(api, recorded):
    api.get_product("abc")
    api.list_movements()
    api.list_movements(q="mouse", limit=5)
    api.low_stock()
    api.report()

    assert [(c["method"], c["url"]) for c in recorded] == [
        ("GET", "http://warehouse.local/api/products/abc"),
        ("GET", "http://warehouse.local/api/movements"),
        ("GET", "http://warehouse.local/api/movements"),
        ("GET", "http://warehouse.local/api/alerts/low-stock"),
        ("GET", "http://warehouse.local/api/reports"),
    ]
    assert recorded[1]["params"] == {"limit": 200}
    assert recorded[2]["params"] == {"limit": 5, "q": "mouse"}
