import json

import httpx
import pytest

from pizzeria.api import PizzaApiClient

MARGHERITA = {
    "_id": "p1",
    "name": "Margherita",
    "description": "Tomato, mozzarella, basil",
    "vegetarian": True,
    "price_small": 5,
    "price_medium": 7,
    "price_large": 9,
}

PEPPERONI = {
    "_id": "p2",
    "name": "Pepperoni",
    "description": "Spicy salami",
    "image": "https://example.test/pepperoni.jpg",
    "price_small": 6.5,
    "price_medium": 8.5,
    "price_large": 10.5,
}


def json_response(status_code, body):
    """JSON response that keeps a literal null body."""
    return httpx.Response(status_code, content=json.dumps(body).encode(), headers={"content-type": "application/json"})


class FakeBackend:
    """In-memory stand-in for the pizzeria REST API."""

    def __init__(self, menus=None):
        # Successive GET /api/pizzas bodies; the last one repeats.
        self.menus = list(menus) if menus is not None else [[MARGHERITA, PEPPERONI]]
        self.calls = []
        self.orders = []
        self.order_status = 200
        self.order_body = {"id": "ord-1"}
        self.seed_status = 201
        self.status_body = {"backend": "Running", "database": "Connected"}
        self.fail_paths = set()

    def handler(self, request: httpx.Request) -> httpx.Response:
        key = (request.method, request.url.path)
        self.calls.append(key)
        if request.url.path in self.fail_paths:
            raise httpx.ConnectError("connection refused", request=request)

        if key == ("GET", "/api/pizzas"):
            body = self.menus.pop(0) if len(self.menus) > 1 else self.menus[0]
            return json_response(200, body)
        if key == ("POST", "/api/pizzas/seed"):
            return httpx.Response(self.seed_status, json={"inserted": 2})
        if key == ("POST", "/api/orders"):
            self.orders.append(json.loads(request.content))
            return httpx.Response(self.order_status, json=self.order_body)
        if key == ("GET", "/test"):
            return httpx.Response(200, json=self.status_body)
        return httpx.Response(404, json={"detail": "Not Found"})

    def count(self, method, path):
        return self.calls.count((method, path))


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def make_client():
    def _make(backend: FakeBackend) -> PizzaApiClient:
        return PizzaApiClient("http://pizzeria.test/", transport=httpx.MockTransport(backend.handler))

    return _make


@pytest.fixture
def client(backend, make_client):
    return make_client(backend)
