"""Domain models for lunch tray orders."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class MenuCategory(Enum):
    """Selection categories that compose one order."""

    ENTREE = "entree"
    SIDE_DISH = "side_dish"
    ACCOMPANIMENT = "accompaniment"


@dataclass(frozen=True)
class MenuItem:
    """A selectable catalog entry."""

    name: str
    description: str
    price: Decimal
    image: str


@dataclass
class OrderSelections:
    """Current category picks plus the prices derived from them."""

    entree: MenuItem | None = None
    side_dish: MenuItem | None = None
    accompaniment: MenuItem | None = None
    item_total_price: Decimal = Decimal("0")
    tax_price: Decimal = Decimal("0")
    order_total_price: Decimal = Decimal("0")

    def selected_items(self) -> list[MenuItem]:
        """Return the set selections in entree, side dish, accompaniment order."""
        return [item for item in (self.entree, self.side_dish, self.accompaniment) if item is not None]

    def selection_for(self, category: MenuCategory) -> MenuItem | None:
        return getattr(self, category.value)
