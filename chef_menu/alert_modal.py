"""Alert modal screen for submit feedback."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static


class AlertModal(ModalScreen[None]):
    """Centered notice with a title and one message line."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("enter", "close", "Close"),
        ("q", "close", "Close"),
    ]

    CSS = """
    AlertModal {
        align: center middle;
        background: $background 60%;
    }

    #alert-dialog {
        width: 48;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #alert-dialog.error {
        border: round #ff6b6b;
    }

    #alert-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #alert-message {
        color: white;
        margin-bottom: 1;
    }

    #alert-help {
        color: #dddddd;
    }
    """

    def __init__(self, title: str, message: str, is_error: bool = False) -> None:
        super().__init__()
        self.alert_title = title
        self.alert_message = message
        self.is_error = is_error

    def compose(self) -> ComposeResult:
        with Container(id="alert-dialog", classes="error" if self.is_error else None):
            yield Static(self.alert_title, id="alert-title")
            yield Static(self.alert_message, id="alert-message")
            yield Static("Enter / Esc / q to close", id="alert-help")

    def action_close(self) -> None:
        self.dismiss()
