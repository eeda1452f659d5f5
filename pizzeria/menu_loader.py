"""Menu bootstrap: fetch, seed when empty, fetch once more."""

from __future__ import annotations

import logging

from pizzeria.api import PizzaApiClient
from pizzeria.config import SEED_IF_EMPTY
from pizzeria.errors import ApiError
from pizzeria.models import MenuItem

logger = logging.getLogger(__name__)


class MenuLoader:
    """Owns the loaded menu and the loading flag shown by the UI."""

    def __init__(self, client: PizzaApiClient, seed_if_empty: bool = SEED_IF_EMPTY) -> None:
        self.client = client
        self.seed_if_empty = seed_if_empty
        self.menu: list[MenuItem] = []
        self.loading = True

    async def load(self) -> list[MenuItem]:
        """Load the menu, seeding the backend first if it has none.

        Errors are logged and leave the menu empty. ``loading`` is always
        False afterwards.
        """
        try:
            menu = await self.client.fetch_menu()
            if not menu and self.seed_if_empty:
                logger.info("menu empty, seeding backend")
                await self.client.seed_menu()
                menu = await self.client.fetch_menu()
            self.menu = menu
            logger.info("menu loaded items=%d", len(menu))
        except ApiError:
            logger.exception("menu load failed")
            self.menu = []
        finally:
            self.loading = False
        return self.menu

    async def reload(self) -> list[MenuItem]:
        self.loading = True
        return await self.load()


async def seed_backend(client: PizzaApiClient) -> list[MenuItem]:
    """Seed the backend menu explicitly and return what it now serves."""
    await client.seed_menu()
    return await client.fetch_menu()
