"""Rendering helpers for menu options and the order summary."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rich.text import Text

from lunchtray.config import CURRENCY_SYMBOL
from lunchtray.models import MenuItem, OrderSelections

SUMMARY_WIDTH = 40


def format_price(value: Decimal) -> str:
    """Format a money amount, e.g. ``$7.50``."""
    return f"{CURRENCY_SYMBOL}{value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)}"


def format_menu_option(item: MenuItem, selected: bool, has_cursor: bool) -> Text:
    """Render one radio-style menu row with its description underneath."""
    pointer = "➤ " if has_cursor else "  "
    marker = "(•)" if selected else "( )"
    text = Text()
    text.append(f"{pointer}{marker} ")
    text.append(item.name, style="bold" if selected else "")
    text.append(f"  {format_price(item.price)}", style="#5fbf72")
    text.append(f"\n       {item.description}", style="dim")
    return text


def _summary_line(label: str, value: Decimal, style: str = "") -> Text:
    price = format_price(value)
    gap = max(1, SUMMARY_WIDTH - len(label) - len(price))
    return Text(f"{label}{' ' * gap}{price}", style=style)


def format_order_summary(state: OrderSelections) -> Text:
    """Render selected items and the subtotal, tax and total lines."""
    text = Text()
    text.append("Order Summary", style="bold")
    text.append("\n\n")

    items = state.selected_items()
    if not items:
        text.append("(no items selected)\n", style="dim")
    for item in items:
        text.append_text(_summary_line(item.name, item.price))
        text.append("\n")

    text.append("─" * SUMMARY_WIDTH + "\n", style="dim")
    text.append_text(_summary_line("Subtotal:", state.item_total_price))
    text.append("\n")
    text.append_text(_summary_line("Tax:", state.tax_price))
    text.append("\n")
    text.append_text(_summary_line("Total:", state.order_total_price, style="bold"))
    return text
