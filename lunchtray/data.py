"""Static menu data."""

from __future__ import annotations

from decimal import Decimal

from lunchtray.constant import MENU_ITEMS_BY_CATEGORY as _MENU_ITEMS_BY_CATEGORY_RAW
from lunchtray.models import MenuCategory, MenuItem


def _build_items(raw_items: list[dict[str, str]]) -> tuple[MenuItem, ...]:
    return tuple(
        MenuItem(
            name=raw["name"],
            description=raw["description"],
            price=Decimal(raw["price"]),
            image=raw["image"],
        )
        for raw in raw_items
    )


MENU_BY_CATEGORY: dict[MenuCategory, tuple[MenuItem, ...]] = {
    category: _build_items(_MENU_ITEMS_BY_CATEGORY_RAW[category.value]) for category in MenuCategory
}

ENTREE_MENU_ITEMS = MENU_BY_CATEGORY[MenuCategory.ENTREE]
SIDE_DISH_MENU_ITEMS = MENU_BY_CATEGORY[MenuCategory.SIDE_DISH]
ACCOMPANIMENT_MENU_ITEMS = MENU_BY_CATEGORY[MenuCategory.ACCOMPANIMENT]


def menu_items_for(category: MenuCategory) -> tuple[MenuItem, ...]:
    """Get the ordered catalog entries for a category."""
    return MENU_BY_CATEGORY[category]
