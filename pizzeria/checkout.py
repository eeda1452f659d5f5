"""Order placement for the current cart."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pizzeria.api import PizzaApiClient
from pizzeria.cart import Cart
from pizzeria.constant import ORDER_FAILED_MESSAGE
from pizzeria.errors import ApiError, OrderRejected

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderOutcome:
    """Result of one placement attempt, ready to show to the guest."""

    ok: bool
    message: str
    order_id: str | None = None


class Checkout:
    """Submits the cart and tracks whether a submission is in flight."""

    def __init__(self, cart: Cart, client: PizzaApiClient) -> None:
        self.cart = cart
        self.client = client
        self.placing = False

    async def place_order(self) -> OrderOutcome | None:
        """Submit the cart as an order.

        Returns None without touching the network when the cart is empty or a
        submission is already running. On success the submitted lines leave the cart.
        """
        if self.cart.is_empty or self.placing:
            return None

        self.placing = True
        try:
            payload = self.cart.to_order_payload()
            logger.info("placing order lines=%d total=%.2f", len(payload.items), payload.total)
            placed = await self.client.submit_order(payload)
        except OrderRejected as exc:
            logger.warning("order rejected status=%s detail=%r", exc.status_code, exc.detail)
            return OrderOutcome(ok=False, message=exc.detail or ORDER_FAILED_MESSAGE)
        except ApiError:
            logger.exception("order submission failed")
            return OrderOutcome(ok=False, message=ORDER_FAILED_MESSAGE)
        finally:
            self.placing = False

        self.cart.discard(payload.items)
        logger.info("order placed id=%s", placed.order_id)
        return OrderOutcome(ok=True, message=f"Order placed! ID: {placed.order_id}", order_id=placed.order_id)
