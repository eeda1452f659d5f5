from pizzeria.cart import Cart
from pizzeria.models import MenuItem
from pizzeria.rendering import (
    EMPTY_CART_MESSAGE,
    format_cart,
    format_cart_summary,
    format_menu_item,
    format_money,
)

P1 = MenuItem(
    pizza_id="p1",
    name="Margherita",
    price_small=5,
    price_medium=7,
    price_large=9,
    description="Tomato and basil",
    vegetarian=True,
)


def test_format_money():
    assert format_money(17.5) == "$17.50"
    assert format_money(0) == "$0.00"


def test_menu_item_shows_badge_description_and_prices():
    plain = format_menu_item(P1, selected=True).plain

    assert plain.startswith("➤ Margherita Veg")
    assert "Tomato and basil" in plain
    assert "Small $5.00  Medium $7.00  Large $9.00" in plain


def test_non_vegetarian_item_has_no_badge():
    item = MenuItem(pizza_id="p2", name="Pepperoni", price_small=6, price_medium=8, price_large=10)

    assert "Veg" not in format_menu_item(item).plain


def test_empty_cart_message():
    assert format_cart(Cart()).plain == EMPTY_CART_MESSAGE


def test_cart_lines_and_totals():
    cart = Cart()
    cart.add(P1, "medium")
    cart.add(P1, "medium")

    plain = format_cart(cart, selected_index=0).plain

    assert "➤ Margherita • medium  $14.00" in plain
    assert "$7.00 × 2" in plain
    assert "Subtotal  $14.00" in plain
    assert "Delivery  $3.50" in plain
    assert "Total     $17.50" in plain


def test_cart_summary():
    cart = Cart()
    assert format_cart_summary(cart) == "Cart: 0 items • $0.00"

    cart.add(P1, "small")
    cart.add(P1, "large")
    assert format_cart_summary(cart) == "Cart: 2 items • $17.50"


def test_cart_window_hides_lines_outside_slice():
    cart = Cart()
    for size in ("small", "medium", "large"):
        cart.add(P1, size)

    plain = format_cart(cart, selected_index=1, window=(1, 2)).plain

    assert plain.startswith("⋮\n➤ Margherita • medium")
    assert "• small" not in plain
    assert "• large" not in plain
    assert "⋮\n\nSubtotal  $21.00" in plain
