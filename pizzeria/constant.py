"""Editable static ordering values."""

from __future__ import annotations

SIZES: tuple[str, ...] = ("small", "medium", "large")

SIZE_LABELS: dict[str, str] = {
    "small": "Small",
    "medium": "Medium",
    "large": "Large",
}

DELIVERY_FEE = 3.5

# Placeholder identity sent with every order until customer entry exists.
GUEST_CUSTOMER: dict[str, str] = {
    "customer_name": "Guest",
    "customer_phone": "000-000-0000",
    "customer_address": "Pickup",
}

ORDER_STATUS_PENDING = "pending"

ORDER_FAILED_MESSAGE = "Failed to place order"
