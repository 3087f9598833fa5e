"""Checkout summary screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from lunchtray.models import OrderSelections
from lunchtray.rendering import format_order_summary


class CheckoutScreen(Screen[None]):
    """Show the order summary and submit or cancel it."""

    BINDINGS = [
        ("enter", "submit", "Submit"),
        ("s", "submit", "Submit"),
        ("b", "back", "Back"),
        ("backspace", "back", "Back"),
        ("c", "cancel", "Cancel"),
        ("escape", "cancel", "Cancel"),
    ]

    CSS = """
    #checkout-pane {
        border: round $secondary;
        padding: 1 2;
    }

    #checkout-help {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(self, state: OrderSelections) -> None:
        super().__init__()
        self.order_state = state

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="checkout-pane"):
            yield Static(id="checkout-summary")
            yield Static("Enter/S submit, B back, C cancel", id="checkout-help")
        yield Footer()

    def on_mount(self) -> None:
        summary = self.query_one("#checkout-summary", Static)
        summary.update(format_order_summary(self.order_state))

    def action_submit(self) -> None:
        self.app.submit_order()

    def action_back(self) -> None:
        self.app.go_back()

    def action_cancel(self) -> None:
        self.app.cancel_order()
