"""In-progress order state with derived prices."""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Callable

from lunchtray.config import TAX_RATE
from lunchtray.models import MenuCategory, MenuItem, OrderSelections

logger = logging.getLogger(__name__)

StateListener = Callable[[OrderSelections], None]


class OrderStateHolder:
    """Owns the selections of the current order and keeps its prices consistent.

    Every mutating call recomputes all three price fields before it returns
    and before any subscribed listener is notified, so a reader never sees a
    total that lags behind the selections.
    """

    def __init__(self, tax_rate: Decimal = TAX_RATE) -> None:
        self.tax_rate = tax_rate
        self._state = OrderSelections()
        self._listeners: list[StateListener] = []

    def current_state(self) -> OrderSelections:
        """Return a snapshot of the current selections and prices."""
        return replace(self._state)

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        self._listeners.remove(listener)

    def update_entree(self, item: MenuItem) -> None:
        self._state.entree = item
        self._recompute_and_publish(f"entree={item.name!r}")

    def update_side_dish(self, item: MenuItem) -> None:
        self._state.side_dish = item
        self._recompute_and_publish(f"side_dish={item.name!r}")

    def update_accompaniment(self, item: MenuItem) -> None:
        self._state.accompaniment = item
        self._recompute_and_publish(f"accompaniment={item.name!r}")

    def update_selection(self, category: MenuCategory, item: MenuItem) -> None:
        """Set the selection for ``category``."""
        if category is MenuCategory.ENTREE:
            self.update_entree(item)
        elif category is MenuCategory.SIDE_DISH:
            self.update_side_dish(item)
        else:
            self.update_accompaniment(item)

    def reset_order(self) -> None:
        """Clear every selection and zero the prices."""
        self._state.entree = None
        self._state.side_dish = None
        self._state.accompaniment = None
        self._recompute_and_publish("reset")

    def _recompute_and_publish(self, change: str) -> None:
        item_total = sum((item.price for item in self._state.selected_items()), Decimal("0"))
        tax = item_total * self.tax_rate
        self._state.item_total_price = item_total
        self._state.tax_price = tax
        self._state.order_total_price = item_total + tax
        logger.debug(
            "order_update %s item_total=%s tax=%s order_total=%s",
            change,
            item_total,
            tax,
            self._state.order_total_price,
        )

        snapshot = self.current_state()
        for listener in list(self._listeners):
            listener(snapshot)
