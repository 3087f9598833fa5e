"""Composition of the order state and the screen sequencer."""

from __future__ import annotations

import logging

from lunchtray.models import MenuCategory, MenuItem, OrderSelections
from lunchtray.navigation import NavigationError, ScreenPosition, ScreenSequencer
from lunchtray.order import OrderStateHolder

logger = logging.getLogger(__name__)


class OrderFlow:
    """Drives one order through the wizard.

    Cancel and confirm both return to START and clear the selections; nothing
    about a confirmed order is retained.
    """

    def __init__(self, order: OrderStateHolder | None = None, sequencer: ScreenSequencer | None = None) -> None:
        self.order = order if order is not None else OrderStateHolder()
        self.sequencer = sequencer if sequencer is not None else ScreenSequencer()

    @property
    def position(self) -> ScreenPosition:
        return self.sequencer.current

    @property
    def state(self) -> OrderSelections:
        return self.order.current_state()

    @property
    def can_navigate_back(self) -> bool:
        return self.sequencer.can_navigate_back

    @property
    def can_advance(self) -> bool:
        """Whether Next is enabled: menu screens need a selection for their category."""
        category = self.position.category
        if category is None:
            return True
        return self.state.selection_for(category) is not None

    def start_order(self) -> ScreenPosition:
        return self.sequencer.start_order()

    def select(self, category: MenuCategory, item: MenuItem) -> None:
        self.order.update_selection(category, item)

    def next(self) -> ScreenPosition:
        category = self.position.category
        if category is not None and self.state.selection_for(category) is None:
            raise NavigationError(f"No {category.value} selected on {self.position.name}")
        return self.sequencer.next()

    def back(self) -> ScreenPosition:
        return self.sequencer.back()

    def cancel(self) -> ScreenPosition:
        position = self.sequencer.cancel()
        self.order.reset_order()
        return position

    def confirm(self) -> ScreenPosition:
        submitted = self.state
        position = self.sequencer.confirm()
        logger.debug(
            "order_submitted items=%s order_total=%s",
            [item.name for item in submitted.selected_items()],
            submitted.order_total_price,
        )
        self.order.reset_order()
        return position
