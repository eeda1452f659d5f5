import pytest

from pizzeria.errors import ApiError
from pizzeria.models import CartLine, MenuItem, OrderPayload
from tests.conftest import MARGHERITA, PEPPERONI


def test_from_api_maps_wire_fields():
    item = MenuItem.from_api(MARGHERITA)

    assert item.pizza_id == "p1"
    assert item.name == "Margherita"
    assert item.vegetarian is True
    assert item.image is None
    assert (item.price_small, item.price_medium, item.price_large) == (5.0, 7.0, 9.0)


def test_from_api_defaults_optional_fields():
    item = MenuItem.from_api({"_id": 3, "name": "Plain", "price_small": 1, "price_medium": 2, "price_large": 3})

    assert item.pizza_id == "3"
    assert item.description == ""
    assert item.vegetarian is False
    assert item.image is None


def test_from_api_keeps_image_reference():
    assert MenuItem.from_api(PEPPERONI).image == "https://example.test/pepperoni.jpg"


@pytest.mark.parametrize(
    "raw",
    [
        {"name": "No id", "price_small": 1, "price_medium": 2, "price_large": 3},
        {"_id": "x", "name": "No large", "price_small": 1, "price_medium": 2},
        {"_id": "x", "name": "Bad", "price_small": "cheap", "price_medium": 2, "price_large": 3},
        "not an object",
    ],
)
def test_from_api_rejects_malformed_items(raw):
    with pytest.raises(ApiError):
        MenuItem.from_api(raw)


def test_price_for_each_size():
    item = MenuItem.from_api(MARGHERITA)

    assert item.price_for("small") == 5
    assert item.price_for("medium") == 7
    assert item.price_for("large") == 9
    with pytest.raises(ValueError):
        item.price_for("family")


def test_order_payload_json_shape():
    line = CartLine(pizza_id="p1", name="Margherita", size="medium", quantity=2, unit_price=7.0)
    payload = OrderPayload(
        items=(line,),
        subtotal=14.0,
        delivery_fee=3.5,
        total=17.5,
        customer_name="Guest",
        customer_phone="000-000-0000",
        customer_address="Pickup",
        status="pending",
    )

    assert payload.to_json() == {
        "customer_name": "Guest",
        "customer_phone": "000-000-0000",
        "customer_address": "Pickup",
        "items": [{"pizza_id": "p1", "name": "Margherita", "size": "medium", "quantity": 2, "unit_price": 7.0}],
        "subtotal": 14.0,
        "delivery_fee": 3.5,
        "total": 17.5,
        "status": "pending",
    }
