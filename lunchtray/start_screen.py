"""Start order screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Footer, Header, Static


class StartOrderScreen(Screen[None]):
    """Landing screen with a single start-order action."""

    BINDINGS = [
        ("enter", "start_order", "Start Order"),
        ("s", "start_order", "Start Order"),
    ]

    CSS = """
    StartOrderScreen {
        align: center middle;
    }

    #start-dialog {
        width: 44;
        height: auto;
        border: round $primary;
        padding: 1 2;
    }

    #start-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #start-help {
        color: $text-muted;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="start-dialog"):
            yield Static("Lunch Tray", id="start-title")
            yield Static("Press Enter to start your order.", id="start-help")
        yield Footer()

    def action_start_order(self) -> None:
        self.app.start_order()
