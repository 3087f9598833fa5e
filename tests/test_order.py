"""Tests for the order state holder and its price recomputation."""

from decimal import Decimal

from lunchtray.data import ACCOMPANIMENT_MENU_ITEMS, ENTREE_MENU_ITEMS, SIDE_DISH_MENU_ITEMS
from lunchtray.models import MenuCategory, MenuItem
from lunchtray.order import OrderStateHolder


def _item(name: str, price: str) -> MenuItem:
    return MenuItem(name=name, description="", price=Decimal(price), image="")


def test_new_order_is_empty():
    """A fresh holder has no selections and zero prices."""
    state = OrderStateHolder().current_state()
    assert state.entree is None
    assert state.side_dish is None
    assert state.accompaniment is None
    assert state.item_total_price == 0
    assert state.tax_price == 0
    assert state.order_total_price == 0


def test_entree_and_side_dish_prices():
    """5.00 + 2.50 at 8% tax gives 7.50 / 0.60 / 8.10."""
    holder = OrderStateHolder(tax_rate=Decimal("0.08"))
    holder.update_entree(_item("Pasta", "5.00"))
    holder.update_side_dish(_item("Salad", "2.50"))

    state = holder.current_state()
    assert state.item_total_price == Decimal("7.50")
    assert state.tax_price == Decimal("0.60")
    assert state.order_total_price == Decimal("8.10")
    assert state.accompaniment is None


def test_last_selection_per_category_wins():
    """Only the most recent pick in each category counts toward the total."""
    holder = OrderStateHolder()
    holder.update_entree(ENTREE_MENU_ITEMS[0])
    holder.update_accompaniment(ACCOMPANIMENT_MENU_ITEMS[0])
    holder.update_entree(ENTREE_MENU_ITEMS[1])
    holder.update_side_dish(SIDE_DISH_MENU_ITEMS[2])
    holder.update_accompaniment(ACCOMPANIMENT_MENU_ITEMS[1])

    state = holder.current_state()
    expected = ENTREE_MENU_ITEMS[1].price + SIDE_DISH_MENU_ITEMS[2].price + ACCOMPANIMENT_MENU_ITEMS[1].price
    assert state.entree == ENTREE_MENU_ITEMS[1]
    assert state.item_total_price == expected
    assert state.tax_price == expected * holder.tax_rate
    assert state.order_total_price == state.item_total_price + state.tax_price


def test_prices_consistent_after_every_mutation():
    """Tax and total track the item total after each update."""
    holder = OrderStateHolder()
    updates = [
        (MenuCategory.SIDE_DISH, SIDE_DISH_MENU_ITEMS[0]),
        (MenuCategory.ENTREE, ENTREE_MENU_ITEMS[3]),
        (MenuCategory.ACCOMPANIMENT, ACCOMPANIMENT_MENU_ITEMS[2]),
        (MenuCategory.SIDE_DISH, SIDE_DISH_MENU_ITEMS[3]),
    ]
    for category, item in updates:
        holder.update_selection(category, item)
        state = holder.current_state()
        assert state.selection_for(category) == item
        assert state.item_total_price == sum((i.price for i in state.selected_items()), Decimal("0"))
        assert state.tax_price == state.item_total_price * holder.tax_rate
        assert state.order_total_price == state.item_total_price + state.tax_price


def test_reset_clears_everything():
    """Reset yields empty selections and zero prices, and is idempotent."""
    holder = OrderStateHolder()
    holder.update_entree(ENTREE_MENU_ITEMS[0])
    holder.update_side_dish(SIDE_DISH_MENU_ITEMS[0])
    holder.update_accompaniment(ACCOMPANIMENT_MENU_ITEMS[0])

    holder.reset_order()
    holder.reset_order()

    state = holder.current_state()
    assert state.selected_items() == []
    assert state.item_total_price == 0
    assert state.tax_price == 0
    assert state.order_total_price == 0


def test_current_state_is_a_snapshot():
    """Mutating a returned snapshot does not touch the holder."""
    holder = OrderStateHolder()
    holder.update_entree(ENTREE_MENU_ITEMS[0])

    snapshot = holder.current_state()
    snapshot.entree = None
    snapshot.item_total_price = Decimal("99")

    state = holder.current_state()
    assert state.entree == ENTREE_MENU_ITEMS[0]
    assert state.item_total_price == ENTREE_MENU_ITEMS[0].price


def test_listeners_see_recomputed_state():
    """Subscribers get a consistent snapshot after each mutation."""
    holder = OrderStateHolder()
    seen = []
    holder.subscribe(seen.append)

    holder.update_entree(_item("Chili", "4.00"))
    holder.reset_order()
    assert [s.order_total_price for s in seen] == [Decimal("4.32"), Decimal("0")]
    assert seen[0].entree is not None
    assert seen[1].entree is None

    holder.unsubscribe(seen.append)
    holder.update_entree(_item("Chili", "4.00"))
    assert len(seen) == 2


def test_tax_is_exact_for_odd_prices_and_rates():
    """Tax keeps full precision instead of rounding to cents."""
    holder = OrderStateHolder()
    holder.update_entree(_item("Special", "4.99"))
    state = holder.current_state()
    assert state.tax_price == Decimal("0.3992")
    assert state.order_total_price == Decimal("5.3892")

    holder = OrderStateHolder(tax_rate=Decimal("0.075"))
    holder.update_entree(_item("Pasta", "5.50"))
    state = holder.current_state()
    assert state.tax_price == Decimal("0.4125")
    assert state.order_total_price == Decimal("5.9125")
