"""Exceptions raised while talking to the pizzeria backend."""

from __future__ import annotations


class PizzeriaError(Exception):
    """Base class for pizzeria client errors."""


class ApiError(PizzeriaError):
    """A backend call failed: transport error, bad status or unreadable body."""


class OrderRejected(ApiError):
    """The backend answered an order submission with a non-success status."""

    def __init__(self, status_code: int, detail: str | None = None) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail or f"Order rejected with status {status_code}")
