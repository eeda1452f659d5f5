"""Rendering helpers for menu rows, cart lines and totals."""

from __future__ import annotations

from rich.text import Text

from pizzeria.cart import Cart
from pizzeria.constant import SIZE_LABELS, SIZES
from pizzeria.models import CartLine, MenuItem

VEG_BADGE_STYLE = "bold #0b1f0f on #5fbf72"
EMPTY_CART_MESSAGE = "Your cart is empty. Add some pizzas!"


def format_money(amount: float) -> str:
    return f"${amount:.2f}"


def format_cart_summary(cart: Cart) -> str:
    """Header summary, e.g. ``Cart: 2 items • $17.50``."""
    return f"Cart: {cart.item_count} items • {format_money(cart.total)}"


def format_menu_item(item: MenuItem, selected: bool = False) -> Text:
    """Render one menu entry with its badge, description and prices."""
    text = Text()
    pointer = "➤ " if selected else "  "
    text.append(pointer)
    text.append(item.name, style="bold" if selected else None)
    if item.vegetarian:
        text.append(" ")
        text.append("Veg", style=VEG_BADGE_STYLE)
    if item.description:
        text.append(f"\n    {item.description}", style="dim")
    prices = "  ".join(f"{SIZE_LABELS[size]} {format_money(item.price_for(size))}" for size in SIZES)
    text.append(f"\n    {prices}")
    return text


def format_cart_line(line: CartLine, selected: bool = False) -> Text:
    text = Text()
    pointer = "➤ " if selected else "  "
    text.append(pointer)
    text.append(f"{line.name} • {line.size}", style="bold" if selected else None)
    text.append(f"  {format_money(line.line_total)}")
    text.append(f"\n    {format_money(line.unit_price)} × {line.quantity}", style="dim")
    return text


def format_totals(cart: Cart) -> Text:
    text = Text()
    text.append(f"Subtotal  {format_money(cart.subtotal)}\n")
    text.append(f"Delivery  {format_money(cart.delivery)}\n")
    text.append(f"Total     {format_money(cart.total)}", style="bold")
    return text


def format_cart(
    cart: Cart,
    selected_index: int | None = None,
    window: tuple[int, int] | None = None,
) -> Text:
    """Render cart lines followed by the totals block.

    ``window`` is a (start, end) slice of lines to show; hidden lines above or
    below are marked with an ellipsis row.
    """
    if cart.is_empty:
        return Text(EMPTY_CART_MESSAGE)

    lines = cart.lines
    start, end = window if window is not None else (0, len(lines))

    text = Text()
    if start > 0:
        text.append("⋮\n", style="dim")
    for idx in range(start, end):
        if idx > start:
            text.append("\n")
        text.append_text(format_cart_line(lines[idx], selected=idx == selected_index))
    if end < len(lines):
        text.append("\n⋮", style="dim")
    text.append("\n\n")
    text.append_text(format_totals(cart))
    return text
