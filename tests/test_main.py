import io

import httpx
from rich.console import Console

from pizzeria import main as main_module
from pizzeria.api import PizzaApiClient
from tests.conftest import FakeBackend


def _patch_client(monkeypatch, backend):
    def factory(base_url):
        return PizzaApiClient(base_url, transport=httpx.MockTransport(backend.handler))

    monkeypatch.setattr(main_module, "PizzaApiClient", factory)


def test_parser_defaults():
    args = main_module.build_parser().parse_args([])

    assert args.command is None
    assert args.no_seed is False
    assert args.backend_url == main_module.BACKEND_URL


def test_parser_seed_command():
    args = main_module.build_parser().parse_args(["--backend-url", "http://shop.test", "seed"])

    assert args.command == "seed"
    assert args.backend_url == "http://shop.test"


def test_run_seed_reports_menu_size(monkeypatch):
    backend = FakeBackend()
    _patch_client(monkeypatch, backend)
    out = io.StringIO()

    code = main_module.run_seed("http://shop.test", console=Console(file=out, width=120))

    assert code == 0
    assert backend.calls == [("POST", "/api/pizzas/seed"), ("GET", "/api/pizzas")]
    assert "2 pizzas on the menu" in out.getvalue()


def test_run_seed_failure_exit_code(monkeypatch):
    backend = FakeBackend()
    backend.fail_paths.add("/api/pizzas/seed")
    _patch_client(monkeypatch, backend)
    out = io.StringIO()

    code = main_module.run_seed("http://shop.test", console=Console(file=out, width=120))

    assert code == 1
    assert "Seed failed" in out.getvalue()
