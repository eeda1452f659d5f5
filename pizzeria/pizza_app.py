"""Main Textual app class."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static
from textual.worker import Worker

from pizzeria.api import PizzaApiClient
from pizzeria.cart import Cart
from pizzeria.checkout import Checkout
from pizzeria.config import BACKEND_URL, SEED_IF_EMPTY
from pizzeria.constant import SIZE_LABELS
from pizzeria.errors import ApiError
from pizzeria.menu_loader import MenuLoader
from pizzeria.models import CartLine, MenuItem
from pizzeria.notice_modal import NoticeModal
from pizzeria.rendering import format_cart, format_cart_summary, format_menu_item

logger = logging.getLogger(__name__)

_MENU_ROWS_PER_ITEM = 3
_CART_ROWS_PER_LINE = 2
# Blank line, three totals rows and the two ellipsis rows.
_CART_TOTALS_ROWS = 6
_HELP_LINE = "J/K move, S/M/L add size, Tab switch pane, D remove, Ctrl+S place order, R reload, B backend."


class PizzaOrderApp(App):
    """A Textual app for browsing the pizza menu and placing an order."""

    TITLE = "Blue's Pizza"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #cart-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 4;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    active_pane = reactive("menu")
    menu_index = reactive(0)
    cart_index = reactive(None)

    BINDINGS = [
        Binding("tab", "switch_pane", "Switch pane", priority=True),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("up", "move_cursor(-1)", "Previous"),
        ("s", "add_selected('small')", "Small"),
        ("m", "add_selected('medium')", "Medium"),
        ("l", "add_selected('large')", "Large"),
        ("d", "remove_selected", "Remove one"),
        ("r", "reload_menu", "Reload menu"),
        ("b", "check_backend", "Backend status"),
        Binding("ctrl+s", "place_order", "Place order", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, client: PizzaApiClient | None = None, seed_if_empty: bool = SEED_IF_EMPTY) -> None:
        super().__init__()
        self.client = client or PizzaApiClient(BACKEND_URL)
        self.menu_loader = MenuLoader(self.client, seed_if_empty=seed_if_empty)
        self.cart = Cart()
        self.checkout = Checkout(self.cart, self.client)
        self.system_status = ""
        self._order_worker: Worker[None] | None = None

    @property
    def menu(self) -> list[MenuItem]:
        return self.menu_loader.menu

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static("Menu", classes="pane-title")
                yield Static("Loading menu...", id="menu-list")
            with Vertical(id="cart-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static(id="cart-list")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        logger.debug("app mounted backend=%s", self.client.base_url)
        self._refresh_all()
        self.run_worker(self._load_menu(), exclusive=True, group="menu")

    async def on_unmount(self) -> None:
        await self.client.aclose()

    async def _load_menu(self) -> None:
        await self.menu_loader.load()
        self.menu_index = 0
        self._refresh_all()

    async def _reload_menu(self) -> None:
        await self.menu_loader.reload()
        self.menu_index = 0
        self._refresh_all()

    async def _place_order(self) -> None:
        outcome = await self.checkout.place_order()
        if outcome is None:
            return

        self.system_status = outcome.message
        if outcome.ok:
            self.cart_index = None if self.cart.is_empty else 0
            self.push_screen(NoticeModal("Order placed", outcome.message))
        else:
            self.push_screen(NoticeModal("Order failed", outcome.message, error=True))
        self._refresh_all()

    async def _check_backend(self) -> None:
        try:
            report = await self.client.check_status()
        except ApiError:
            logger.exception("backend status check failed")
            self.system_status = "Backend unreachable"
        else:
            backend = report.get("backend", "unknown")
            database = report.get("database", "unknown")
            self.system_status = f"Backend: {backend} | Database: {database}"
        self._refresh_status()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, NoticeModal)

    def _order_in_flight(self) -> bool:
        return self._order_worker is not None and not self._order_worker.is_finished

    def action_switch_pane(self) -> None:
        if self._modal_open():
            return
        self.active_pane = "cart" if self.active_pane == "menu" else "menu"
        if self.active_pane == "cart" and self.cart_index is None and not self.cart.is_empty:
            self.cart_index = 0
        self._refresh_all()

    def action_move_cursor(self, delta: int) -> None:
        if self._modal_open():
            return
        if self.active_pane == "menu":
            if not self.menu:
                return
            self.menu_index = (self.menu_index + delta) % len(self.menu)
            self._refresh_menu()
            return

        lines = self.cart.lines
        if not lines:
            return
        if self.cart_index is None:
            self.cart_index = 0 if delta > 0 else len(lines) - 1
        else:
            self.cart_index = (self.cart_index + delta) % len(lines)
        self._refresh_cart()

    def action_add_selected(self, size: str) -> None:
        if self._modal_open():
            return
        item = self._selected_menu_item()
        if item is None:
            return
        line = self.cart.add(item, size)
        self.system_status = f"Added {item.name} ({SIZE_LABELS[size]})"
        logger.debug("cart add pizza_id=%s size=%s quantity=%d", line.pizza_id, line.size, line.quantity)
        self._refresh_cart()
        self._refresh_status()

    def action_remove_selected(self) -> None:
        if self._modal_open() or self.active_pane != "cart":
            return
        line = self._selected_cart_line()
        if line is None:
            return
        self.cart.remove_one(line.pizza_id, line.size)
        if self.cart.is_empty:
            self.cart_index = None
        else:
            self.cart_index = min(self.cart_index or 0, len(self.cart.lines) - 1)
        self.system_status = f"Removed one {line.name} ({SIZE_LABELS[line.size]})"
        self._refresh_cart()
        self._refresh_status()

    def action_place_order(self) -> None:
        if self._modal_open():
            return
        if self.cart.is_empty or self.checkout.placing or self._order_in_flight():
            return
        self.system_status = "Placing order..."
        self._refresh_status()
        self._order_worker = self.run_worker(self._place_order(), group="order")

    def action_reload_menu(self) -> None:
        if self._modal_open() or self.menu_loader.loading:
            return
        self.menu_loader.loading = True
        self._refresh_menu()
        self.run_worker(self._reload_menu(), exclusive=True, group="menu")

    def action_check_backend(self) -> None:
        if self._modal_open():
            return
        self.system_status = "Checking backend..."
        self._refresh_status()
        self.run_worker(self._check_backend(), exclusive=True, group="status")

    def _selected_menu_item(self) -> MenuItem | None:
        if self.menu_loader.loading or not self.menu:
            return None
        if not (0 <= self.menu_index < len(self.menu)):
            return None
        return self.menu[self.menu_index]

    def _selected_cart_line(self) -> CartLine | None:
        lines = self.cart.lines
        if self.cart_index is None or not (0 <= self.cart_index < len(lines)):
            return None
        return lines[self.cart_index]

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = max(0, selected - rows // 2)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_cart()
        self._refresh_status()

    def _refresh_menu(self) -> None:
        try:
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return
        if self.menu_loader.loading:
            menu_widget.update("Loading menu...")
            return
        if not self.menu:
            menu_widget.update("No pizzas on the menu. Press R to reload.")
            return

        visible_items = max(1, self._visible_rows(menu_widget) // _MENU_ROWS_PER_ITEM)
        start, end = self._window_bounds(len(self.menu), visible_items, self.menu_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            lines.append_text(format_menu_item(self.menu[idx], selected=idx == self.menu_index))
        if end < len(self.menu):
            lines.append("\n⋮", style="dim")

        menu_widget.update(lines)

    def _refresh_cart(self) -> None:
        self.sub_title = format_cart_summary(self.cart)
        try:
            cart_widget = self.query_one("#cart-list", Static)
        except NoMatches:
            return
        selected = self.cart_index if self.active_pane == "cart" else None
        cart_widget.update(format_cart(self.cart, selected_index=selected, window=self._cart_window(cart_widget)))

    def _cart_window(self, cart_widget: Static) -> tuple[int, int]:
        visible_lines = max(1, (self._visible_rows(cart_widget) - _CART_TOTALS_ROWS) // _CART_ROWS_PER_LINE)
        return self._window_bounds(len(self.cart.lines), visible_lines, self.cart_index)

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        status = self.system_status or "Ready"
        bar.update(Text(f"{_HELP_LINE}\n{status}"))
