"""Menu selection screen shared by the entree, side dish and accompaniment steps."""

from __future__ import annotations

from typing import Callable, Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from lunchtray.models import MenuCategory, MenuItem
from lunchtray.rendering import format_menu_option


class MenuScreen(Screen[None]):
    """Radio-style list of one category's menu items."""

    BINDINGS = [
        ("j", "move_cursor(1)", "Next item"),
        ("k", "move_cursor(-1)", "Previous item"),
        ("down", "move_cursor(1)", "Next item"),
        ("up", "move_cursor(-1)", "Previous item"),
        ("enter", "select_current", "Select"),
        ("space", "select_current", "Select"),
        ("n", "next", "Next"),
        ("b", "back", "Back"),
        ("backspace", "back", "Back"),
        ("c", "cancel", "Cancel"),
        ("escape", "cancel", "Cancel"),
    ]

    CSS = """
    #menu-pane {
        border: round $primary;
        padding: 1;
    }

    #menu-list {
        height: 1fr;
    }

    #menu-help {
        margin-top: 1;
        color: $text-muted;
    }
    """

    cursor_index = reactive(0)

    def __init__(
        self,
        category: MenuCategory,
        options: Sequence[MenuItem],
        selected: MenuItem | None,
        on_selection_changed: Callable[[MenuItem], None],
    ) -> None:
        super().__init__()
        self.category = category
        self.options = list(options)
        self.selected = selected
        self.on_selection_changed = on_selection_changed
        if selected in self.options:
            self.set_reactive(MenuScreen.cursor_index, self.options.index(selected))

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="menu-pane"):
            yield Static(id="menu-list")
            yield Static(id="menu-help")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_content()

    def action_move_cursor(self, delta: int) -> None:
        if not self.options:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.options)
        self._refresh_content()

    def action_select_current(self) -> None:
        if not self.options:
            return
        item = self.options[self.cursor_index]
        self.selected = item
        self.on_selection_changed(item)
        self._refresh_content()

    def action_next(self) -> None:
        # Next stays disabled until something is picked.
        if self.selected is None:
            return
        self.app.go_next()

    def action_back(self) -> None:
        self.app.go_back()

    def action_cancel(self) -> None:
        self.app.cancel_order()

    def _refresh_content(self) -> None:
        try:
            menu_list = self.query_one("#menu-list", Static)
            help_text = self.query_one("#menu-help", Static)
        except NoMatches:
            return

        content = Text()
        for idx, item in enumerate(self.options):
            if idx > 0:
                content.append("\n")
            content.append_text(
                format_menu_option(item, selected=item == self.selected, has_cursor=idx == self.cursor_index)
            )
        menu_list.update(content)

        if self.selected is None:
            help_text.update("J/K/↑/↓ move, Enter select, B back, C cancel")
        else:
            help_text.update("J/K/↑/↓ move, Enter select, N next, B back, C cancel")
