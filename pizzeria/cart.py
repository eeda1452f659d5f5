"""In-memory cart with derived totals."""

from __future__ import annotations

from typing import Iterable

from pizzeria.constant import DELIVERY_FEE, GUEST_CUSTOMER, ORDER_STATUS_PENDING
from pizzeria.models import CartLine, MenuItem, OrderPayload


def delivery_fee_for(subtotal: float) -> float:
    """Flat delivery fee for any non-empty order."""
    return DELIVERY_FEE if subtotal > 0 else 0.0


class Cart:
    """Cart lines keyed by (pizza_id, size).

    Lines are immutable; every change replaces the affected line so totals
    are always derived from the current lines.
    """

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    @property
    def subtotal(self) -> float:
        return sum((line.line_total for line in self._lines), 0.0)

    @property
    def delivery(self) -> float:
        return delivery_fee_for(self.subtotal)

    @property
    def total(self) -> float:
        return self.subtotal + self.delivery

    def _index_of(self, pizza_id: str, size: str) -> int | None:
        for idx, line in enumerate(self._lines):
            if line.key == (pizza_id, size):
                return idx
        return None

    def add(self, item: MenuItem, size: str) -> CartLine:
        """Add one unit of ``item`` in ``size`` and return the resulting line."""
        unit_price = item.price_for(size)
        idx = self._index_of(item.pizza_id, size)
        if idx is None:
            line = CartLine(pizza_id=item.pizza_id, name=item.name, size=size, quantity=1, unit_price=unit_price)
            self._lines = [*self._lines, line]
            return line

        existing = self._lines[idx]
        line = CartLine(
            pizza_id=existing.pizza_id,
            name=existing.name,
            size=existing.size,
            quantity=existing.quantity + 1,
            unit_price=existing.unit_price,
        )
        self._lines = [line if i == idx else other for i, other in enumerate(self._lines)]
        return line

    def remove_one(self, pizza_id: str, size: str) -> CartLine | None:
        """Take one unit off a line, dropping the line at zero.

        Returns the remaining line, or None when it was dropped or not found.
        """
        idx = self._index_of(pizza_id, size)
        if idx is None:
            return None

        existing = self._lines[idx]
        if existing.quantity <= 1:
            self._lines = [other for i, other in enumerate(self._lines) if i != idx]
            return None

        line = CartLine(
            pizza_id=existing.pizza_id,
            name=existing.name,
            size=existing.size,
            quantity=existing.quantity - 1,
            unit_price=existing.unit_price,
        )
        self._lines = [line if i == idx else other for i, other in enumerate(self._lines)]
        return line

    def clear(self) -> None:
        self._lines = []

    def discard(self, submitted: Iterable[CartLine]) -> None:
        """Take submitted quantities off the cart.

        Units added after the snapshot was taken stay in the cart.
        """
        sent: dict[tuple[str, str], int] = {}
        for line in submitted:
            sent[line.key] = sent.get(line.key, 0) + line.quantity

        remaining: list[CartLine] = []
        for line in self._lines:
            quantity = line.quantity - sent.get(line.key, 0)
            if quantity <= 0:
                continue
            if quantity != line.quantity:
                line = CartLine(
                    pizza_id=line.pizza_id,
                    name=line.name,
                    size=line.size,
                    quantity=quantity,
                    unit_price=line.unit_price,
                )
            remaining.append(line)
        self._lines = remaining

    def to_order_payload(self) -> OrderPayload:
        """Snapshot the cart into an order with the guest placeholder identity."""
        subtotal = self.subtotal
        delivery = delivery_fee_for(subtotal)
        return OrderPayload(
            items=self.lines,
            subtotal=subtotal,
            delivery_fee=delivery,
            total=subtotal + delivery,
            customer_name=GUEST_CUSTOMER["customer_name"],
            customer_phone=GUEST_CUSTOMER["customer_phone"],
            customer_address=GUEST_CUSTOMER["customer_address"],
            status=ORDER_STATUS_PENDING,
        )
