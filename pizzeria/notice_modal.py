"""Order outcome modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static


class NoticeModal(ModalScreen[None]):
    """Centered message box shown after an order attempt."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("enter", "close", "Close"),
        ("q", "close", "Close"),
    ]

    CSS = """
    NoticeModal {
        align: center middle;
        background: $background 60%;
    }

    #notice-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #notice-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #notice-body {
        color: white;
        margin-bottom: 1;
    }

    #notice-help {
        color: #dddddd;
    }
    """

    def __init__(self, title: str, message: str, error: bool = False) -> None:
        super().__init__()
        self.title_text = title
        self.notice_message = message
        self.is_error = error

    def compose(self) -> ComposeResult:
        with Container(id="notice-dialog"):
            yield Static(self.title_text, id="notice-title")
            yield Static(id="notice-body")
            yield Static("Enter/Esc/q close", id="notice-help")

    def on_mount(self) -> None:
        body = self.query_one("#notice-body", Static)
        if self.is_error:
            body.styles.color = "#ffb3b3"
        body.update(Text(self.notice_message))

    def action_close(self) -> None:
        self.dismiss(None)
