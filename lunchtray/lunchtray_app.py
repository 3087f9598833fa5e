"""Main Textual app class."""

from __future__ import annotations

import logging

from textual.app import App
from textual.screen import Screen

from lunchtray.checkout_screen import CheckoutScreen
from lunchtray.data import menu_items_for
from lunchtray.flow import OrderFlow
from lunchtray.menu_screen import MenuScreen
from lunchtray.models import MenuCategory, MenuItem
from lunchtray.navigation import ScreenPosition
from lunchtray.start_screen import StartOrderScreen

logger = logging.getLogger(__name__)


class LunchTrayApp(App):
    """A Textual app that walks one order through entree, side dish, accompaniment and checkout.

    The Textual screen stack mirrors the sequencer's back stack: the app's
    default screen sits at the bottom, StartOrderScreen above it, then one
    screen per position the user has advanced through.
    """

    TITLE = "Lunch Tray"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, flow: OrderFlow | None = None) -> None:
        super().__init__()
        self.flow = flow if flow is not None else OrderFlow()

    def on_mount(self) -> None:
        logger.debug("app_mount")
        self._sync_title()
        self.push_screen(StartOrderScreen())

    def start_order(self) -> None:
        self.flow.start_order()
        self._push_current()

    def go_next(self) -> None:
        if not self.flow.can_advance:
            return
        self.flow.next()
        self._push_current()

    def go_back(self) -> None:
        if not self.flow.can_navigate_back:
            return
        self.flow.back()
        self.pop_screen()
        self._sync_title()

    def cancel_order(self) -> None:
        self.flow.cancel()
        self._pop_to_start()

    def submit_order(self) -> None:
        self.flow.confirm()
        self._pop_to_start()

    def _select(self, category: MenuCategory, item: MenuItem) -> None:
        self.flow.select(category, item)

    def _screen_for(self, position: ScreenPosition) -> Screen:
        if position is ScreenPosition.START:
            return StartOrderScreen()
        if position is ScreenPosition.CHECKOUT:
            return CheckoutScreen(self.flow.state)

        category = position.category
        assert category is not None
        return MenuScreen(
            category,
            menu_items_for(category),
            selected=self.flow.state.selection_for(category),
            on_selection_changed=lambda item: self._select(category, item),
        )

    def _push_current(self) -> None:
        self.push_screen(self._screen_for(self.flow.position))
        self._sync_title()

    def _pop_to_start(self) -> None:
        # Default screen + StartOrderScreen stay on the stack.
        while len(self.screen_stack) > 2:
            self.pop_screen()
        self._sync_title()

    def _sync_title(self) -> None:
        self.sub_title = self.flow.position.title
