"""Screen positions and the linear order-wizard sequencer."""

from __future__ import annotations

import logging
from enum import Enum

from lunchtray.models import MenuCategory

logger = logging.getLogger(__name__)


class NavigationError(RuntimeError):
    """Raised when a caller requests a transition the wizard does not allow."""


class ScreenPosition(Enum):
    START = "START"
    ENTREE = "ENTREE"
    SIDE_DISH = "SIDE_DISH"
    ACCOMPANIMENT = "ACCOMPANIMENT"
    CHECKOUT = "CHECKOUT"

    @property
    def title(self) -> str:
        return SCREEN_TITLES[self]

    @property
    def category(self) -> MenuCategory | None:
        """Menu category selected on this screen, if it is a menu screen."""
        return SCREEN_CATEGORIES.get(self)

    @classmethod
    def from_name(cls, name: str) -> ScreenPosition:
        try:
            return cls[name]
        except KeyError:
            raise NavigationError(f"Unknown screen: {name!r}") from None


SCREEN_TITLES: dict[ScreenPosition, str] = {
    ScreenPosition.START: "Start Order",
    ScreenPosition.ENTREE: "Choose Entree",
    ScreenPosition.SIDE_DISH: "Choose Side Dish",
    ScreenPosition.ACCOMPANIMENT: "Choose Accompaniment",
    ScreenPosition.CHECKOUT: "Order Checkout",
}

SCREEN_CATEGORIES: dict[ScreenPosition, MenuCategory] = {
    ScreenPosition.ENTREE: MenuCategory.ENTREE,
    ScreenPosition.SIDE_DISH: MenuCategory.SIDE_DISH,
    ScreenPosition.ACCOMPANIMENT: MenuCategory.ACCOMPANIMENT,
}

_NEXT_POSITION: dict[ScreenPosition, ScreenPosition] = {
    ScreenPosition.START: ScreenPosition.ENTREE,
    ScreenPosition.ENTREE: ScreenPosition.SIDE_DISH,
    ScreenPosition.SIDE_DISH: ScreenPosition.ACCOMPANIMENT,
    ScreenPosition.ACCOMPANIMENT: ScreenPosition.CHECKOUT,
}


class ScreenSequencer:
    """Tracks the current screen and the back stack of screens before it.

    START is the bottom of the stack. Forward transitions push, back pops,
    and cancel/confirm drop everything above START.
    """

    def __init__(self) -> None:
        self._back_stack: list[ScreenPosition] = []
        self._current = ScreenPosition.START

    @property
    def current(self) -> ScreenPosition:
        return self._current

    @property
    def history(self) -> tuple[ScreenPosition, ...]:
        """Positions that back navigation returns to, oldest first."""
        return tuple(self._back_stack)

    @property
    def can_navigate_back(self) -> bool:
        return bool(self._back_stack)

    def start_order(self) -> ScreenPosition:
        self._require(ScreenPosition.START, action="start_order")
        return self._push(ScreenPosition.ENTREE)

    def next(self) -> ScreenPosition:
        if self._current in {ScreenPosition.START, ScreenPosition.CHECKOUT}:
            raise NavigationError(f"next is not available on {self._current.name}")
        return self._push(_NEXT_POSITION[self._current])

    def back(self) -> ScreenPosition:
        if not self._back_stack:
            raise NavigationError(f"No screen before {self._current.name}")
        previous = self._current
        self._current = self._back_stack.pop()
        logger.debug("navigate_back from=%s to=%s", previous.name, self._current.name)
        return self._current

    def cancel(self) -> ScreenPosition:
        if self._current is ScreenPosition.START:
            raise NavigationError("cancel is not available on START")
        return self._pop_to_start("cancel")

    def confirm(self) -> ScreenPosition:
        self._require(ScreenPosition.CHECKOUT, action="confirm")
        return self._pop_to_start("confirm")

    def navigate_to(self, name: str) -> ScreenPosition:
        """Push the screen registered under ``name``.

        Only the immediate successor of the current screen is reachable this way.
        """
        target = ScreenPosition.from_name(name)
        if _NEXT_POSITION.get(self._current) is not target:
            raise NavigationError(f"Cannot navigate from {self._current.name} to {target.name}")
        return self._push(target)

    def _require(self, position: ScreenPosition, action: str) -> None:
        if self._current is not position:
            raise NavigationError(f"{action} is only available on {position.name}, not {self._current.name}")

    def _push(self, target: ScreenPosition) -> ScreenPosition:
        logger.debug("navigate from=%s to=%s", self._current.name, target.name)
        self._back_stack.append(self._current)
        self._current = target
        return target

    def _pop_to_start(self, action: str) -> ScreenPosition:
        logger.debug("navigate_%s from=%s to=START", action, self._current.name)
        self._back_stack.clear()
        self._current = ScreenPosition.START
        return self._current
