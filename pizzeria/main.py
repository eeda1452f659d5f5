"""Entry point for the pizzeria ordering app."""

from __future__ import annotations

import argparse
import asyncio

from rich.console import Console

from pizzeria.api import PizzaApiClient
from pizzeria.config import BACKEND_URL, SEED_IF_EMPTY
from pizzeria.debug_log import configure_debug_log
from pizzeria.errors import ApiError
from pizzeria.menu_loader import seed_backend
from pizzeria.pizza_app import PizzaOrderApp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pizzeria", description="Order pizza from the terminal.")
    parser.add_argument("--backend-url", default=BACKEND_URL, help=f"Backend base URL (default: {BACKEND_URL})")
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Do not seed the backend when the menu is empty",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("seed", help="Seed the backend demo menu and exit")
    return parser


async def _seed(backend_url: str) -> int:
    async with PizzaApiClient(backend_url) as client:
        menu = await seed_backend(client)
    return len(menu)


def run_seed(backend_url: str, console: Console | None = None) -> int:
    """Seed the backend and report the resulting menu size. Returns an exit code."""
    console = console or Console()
    try:
        count = asyncio.run(_seed(backend_url))
    except ApiError as exc:
        console.print(f"[bold red]Seed failed:[/] {exc}")
        return 1
    console.print(f"Seeded {backend_url}: {count} pizzas on the menu")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_debug_log()

    if args.command == "seed":
        return run_seed(args.backend_url)

    seed_if_empty = SEED_IF_EMPTY and not args.no_seed
    PizzaOrderApp(client=PizzaApiClient(args.backend_url), seed_if_empty=seed_if_empty).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
