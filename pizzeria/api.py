"""Async HTTP client for the pizzeria backend."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from pizzeria.config import BACKEND_URL
from pizzeria.errors import ApiError, OrderRejected
from pizzeria.models import MenuItem, OrderPayload, PlacedOrder

logger = logging.getLogger(__name__)

MENU_PATH = "/api/pizzas"
SEED_PATH = "/api/pizzas/seed"
ORDERS_PATH = "/api/orders"
STATUS_PATH = "/test"


def _json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise ApiError(f"{response.request.method} {response.request.url.path} returned a non-JSON body") from exc


def _detail_from(response: httpx.Response) -> str | None:
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    detail = data.get("detail")
    # Validation errors carry a list of dicts; only plain messages are shown.
    if not isinstance(detail, str) or not detail:
        return None
    return detail


class PizzaApiClient:
    """Client for the menu, seed and order endpoints."""

    def __init__(self, base_url: str = BACKEND_URL, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(base_url=self.base_url, transport=transport, timeout=None)

    async def __aenter__(self) -> PizzaApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise ApiError(f"{method} {path} failed: {exc}") from exc
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    async def fetch_menu(self) -> list[MenuItem]:
        """Fetch the menu; an empty list means the backend has no pizzas yet."""
        response = await self._request("GET", MENU_PATH)
        if not response.is_success:
            raise ApiError(f"GET {MENU_PATH} returned {response.status_code}")
        data = _json_body(response)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ApiError(f"GET {MENU_PATH} returned {type(data).__name__}, expected a list")
        return [MenuItem.from_api(raw) for raw in data]

    async def seed_menu(self) -> None:
        """Ask the backend to populate its demo menu. The response body is ignored."""
        response = await self._request("POST", SEED_PATH)
        if not response.is_success:
            logger.warning("seed returned status %s", response.status_code)

    async def submit_order(self, payload: OrderPayload) -> PlacedOrder:
        """Submit an order and return the backend's order id."""
        response = await self._request("POST", ORDERS_PATH, json=payload.to_json())
        if not response.is_success:
            raise OrderRejected(response.status_code, _detail_from(response))
        data = _json_body(response)
        if not isinstance(data, dict):
            raise ApiError(f"POST {ORDERS_PATH} returned {type(data).__name__}, expected an object")
        order_id = data.get("id")
        return PlacedOrder(order_id=None if order_id is None else str(order_id))

    async def check_status(self) -> dict[str, Any]:
        """Fetch the backend health report."""
        response = await self._request("GET", STATUS_PATH)
        if not response.is_success:
            raise ApiError(f"GET {STATUS_PATH} returned {response.status_code}")
        data = _json_body(response)
        if not isinstance(data, dict):
            raise ApiError(f"GET {STATUS_PATH} returned {type(data).__name__}, expected an object")
        return data
