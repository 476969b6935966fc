from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_cap_policy, get_cart, get_loader
from app import create_app
from config.config import config
from core.checkout import InMemoryCart
from tests.conftest import OPTION_ROWS, StubLoader


def _api_config(key=None):
    return lambda: {"host": "127.0.0.1", "port": 8000, "key": key}


@pytest.fixture
def cart():
    return InMemoryCart()


@pytest.fixture
def make_client(monkeypatch, cart):
    monkeypatch.setattr(config, "get_api_config", _api_config())

    def _make(loader=None, cap_policy="ignore"):
        app = create_app()
        app.dependency_overrides[get_loader] = lambda: loader or StubLoader()
        app.dependency_overrides[get_cart] = lambda: cart
        app.dependency_overrides[get_cap_policy] = lambda: cap_policy
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()


def _picks(*pairs):
    return [{"action": "select", "group_id": g, "option_id": o} for g, o in pairs]


def test_ping(client):
    response = client.get("/ping")
    assert response.status_code == 200
    assert response.json()["success"] is True


def test_get_product_options(client):
    response = client.get("/api/products/pizza/options")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Pizza"
    assert Decimal(str(data["base_price"])) == Decimal("10.00")
    assert [g["id"] for g in data["groups"]] == ["size", "toppings"]
    assert data["groups"][0]["exclusive"] is True
    assert [o["id"] for o in data["groups"][0]["options"]] == ["p", "m", "g"]


def test_promotional_base_price(client):
    data = client.get("/api/products/burger/options").json()
    assert Decimal(str(data["base_price"])) == Decimal("18.50")


def test_unknown_product_is_404(client):
    response = client.get("/api/products/sushi/options")
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_preview_valid_selection_includes_prices(client):
    response = client.post(
        "/api/products/pizza/selection",
        json={"actions": _picks(("size", "m"), ("toppings", "cheese")), "quantity": 2},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is True
    assert Decimal(str(data["unit_price"])) == Decimal("14.50")
    assert Decimal(str(data["total_price"])) == Decimal("29.00")
    assert data["description"] == "Pizza (M, Cheese)"
    assert data["summary"]["total_violations"] == 0


def test_preview_invalid_selection_lists_violations_without_prices(client):
    response = client.post(
        "/api/products/pizza/selection", json={"actions": _picks(("toppings", "bacon"))}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is False
    assert data["total_price"] is None
    assert [v["constraint_type"] for v in data["violations"]] == ["required", "min_selections"]


def test_preview_exclusive_replace_and_cap(client):
    actions = _picks(("size", "p"), ("size", "g"), ("toppings", "bacon"), ("toppings", "cheese"))
    actions.append({"action": "deselect", "group_id": "toppings", "option_id": "bacon"})

    data = client.post("/api/products/pizza/selection", json={"actions": actions}).json()

    assert [(s["group_id"], s["option_id"]) for s in data["selection"]] == [
        ("size", "g"),
        ("toppings", "cheese"),
    ]


def test_commit_valid_selection_adds_to_cart(client, cart):
    response = client.post(
        "/api/products/pizza/commit",
        json={"actions": _picks(("size", "g"), ("toppings", "bacon")), "observations": "well baked"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["cart_entry_id"] == "pizza-1"
    assert Decimal(str(data["total_price"])) == Decimal("18.00")
    assert data["line_item"]["description"] == "Pizza (G, Bacon)"

    cart_data = client.get("/api/cart").json()
    assert cart_data["item_count"] == 1
    assert cart_data["entries"][0]["observations"] == "well baked"
    assert len(cart.entries) == 1


def test_commit_invalid_selection_is_refused(client, cart):
    response = client.post("/api/products/pizza/commit", json={"actions": []})

    assert response.status_code == 422
    data = response.json()
    assert data["success"] is False
    assert data["error"] == (
        "Select at least one option from 'Size'; 'Size' requires at least 1 selection(s)"
    )
    assert len(data["violations"]) == 2
    assert cart.entries == []


def test_clear_cart(client, cart):
    client.post("/api/products/pizza/commit", json={"actions": _picks(("size", "p"))})
    assert len(cart.entries) == 1

    response = client.delete("/api/cart")

    assert response.status_code == 200
    assert response.json()["entries"] == []


def test_unknown_option_is_404(client):
    response = client.post(
        "/api/products/pizza/selection", json={"actions": _picks(("size", "xl"))}
    )
    assert response.status_code == 404


def test_unavailable_option_is_409(client):
    response = client.post(
        "/api/products/pizza/selection", json={"actions": _picks(("toppings", "egg"))}
    )
    assert response.status_code == 409


def test_reject_policy_refuses_pick_past_cap(make_client):
    options = [dict(row, available=True) for row in OPTION_ROWS]
    client = make_client(loader=StubLoader(options=options), cap_policy="reject")

    response = client.post(
        "/api/products/pizza/selection",
        json={"actions": _picks(("toppings", "bacon"), ("toppings", "cheese"), ("toppings", "egg"))},
    )

    assert response.status_code == 409
    assert response.json()["error"] == "'Toppings' allows at most 2 selection(s)"


def test_data_store_failure_is_503(make_client):
    client = make_client(loader=StubLoader(fail=True))
    response = client.get("/api/products/pizza/options")
    assert response.status_code == 503


@pytest.mark.parametrize(
    "body",
    [
        {"actions": [{"action": "explode", "group_id": "size", "option_id": "p"}]},
        {"actions": [{"action": "select", "group_id": "size"}]},
        {"actions": [], "quantity": 0},
    ],
)
def test_malformed_requests_are_422(client, body):
    response = client.post("/api/products/pizza/selection", json=body)
    assert response.status_code == 422
    assert response.json()["error"] == "Validation error"


def test_clear_action_needs_no_ids(client):
    response = client.post(
        "/api/products/pizza/selection",
        json={"actions": _picks(("size", "p")) + [{"action": "clear"}]},
    )
    assert response.status_code == 200
    assert response.json()["selection"] == []


def test_api_key_is_enforced_when_configured(make_client, monkeypatch):
    client = make_client()
    monkeypatch.setattr(config, "get_api_config", _api_config("secret"))

    assert client.get("/api/products/pizza/options").status_code == 401
    assert client.get("/ping").status_code == 200
    response = client.get("/api/products/pizza/options", headers={"X-API-Key": "secret"})
    assert response.status_code == 200
