"""Domain models for pizzeria ordering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pizzeria.constant import SIZES
from pizzeria.errors import ApiError


@dataclass(frozen=True)
class MenuItem:
    """A pizza on the menu with per-size pricing."""

    pizza_id: str
    name: str
    price_small: float
    price_medium: float
    price_large: float
    description: str = ""
    image: str | None = None
    vegetarian: bool = False

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> MenuItem:
        """Build a menu item from one ``GET /api/pizzas`` entry."""
        try:
            return cls(
                pizza_id=str(raw["_id"]),
                name=str(raw["name"]),
                price_small=float(raw["price_small"]),
                price_medium=float(raw["price_medium"]),
                price_large=float(raw["price_large"]),
                description=str(raw.get("description") or ""),
                image=raw.get("image") or None,
                vegetarian=bool(raw.get("vegetarian", False)),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ApiError(f"Malformed menu item: {exc!r}") from exc

    def price_for(self, size: str) -> float:
        """Return the unit price for a size."""
        if size not in SIZES:
            raise ValueError(f"Unknown size: {size!r}")
        return getattr(self, f"price_{size}")


@dataclass(frozen=True)
class CartLine:
    """One (pizza, size) selection with its aggregated quantity."""

    pizza_id: str
    name: str
    size: str
    quantity: int
    unit_price: float

    @property
    def key(self) -> tuple[str, str]:
        return (self.pizza_id, self.size)

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity

    def to_payload(self) -> dict[str, Any]:
        return {
            "pizza_id": self.pizza_id,
            "name": self.name,
            "size": self.size,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
        }


@dataclass(frozen=True)
class OrderPayload:
    """Snapshot of a cart as submitted to ``POST /api/orders``."""

    items: tuple[CartLine, ...]
    subtotal: float
    delivery_fee: float
    total: float
    customer_name: str
    customer_phone: str
    customer_address: str
    status: str

    def to_json(self) -> dict[str, Any]:
        return {
            "customer_name": self.customer_name,
            "customer_phone": self.customer_phone,
            "customer_address": self.customer_address,
            "items": [line.to_payload() for line in self.items],
            "subtotal": self.subtotal,
            "delivery_fee": self.delivery_fee,
            "total": self.total,
            "status": self.status,
        }


@dataclass(frozen=True)
class PlacedOrder:
    """Backend acknowledgement of a submitted order."""

    order_id: str | None
