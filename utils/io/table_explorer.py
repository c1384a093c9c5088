"""
TUI for exploring the symbol table built from a text corpus.

Usage:
    python -m utils.io.table_explorer tinyTale.txt --min-length 1
"""

import argparse
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import ScrollableContainer
from textual.coordinate import Coordinate
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Label, Static

from constants import DEFAULT_TABLE, MIN_LENGTH
from symboltables import TABLE_FACTORIES
from symboltables.frequency_counter import FrequencyCounter
from symboltables.ordered import BST
from utils.display import table_to_rich_tree


def key_summary(table: BST[str, int], key: str) -> Text:
    """Order statistics around a key as Rich Text."""
    text = Text()
    rank = table.rank(key)
    rows = [
        ("Count", str(table.get(key))),
        ("Rank", f"{rank} of {table.size()}"),
        ("Previous key", repr(table.select(rank - 1)) if rank > 0 else "-"),
        (
            "Next key",
            repr(table.select(rank + 1)) if rank + 1 < table.size() else "-",
        ),
    ]
    for name, value in rows:
        text.append(f"{name:>14}: ", style="bold")
        text.append(f"{value}\n")
    return text


class KeyDetailScreen(Screen):
    """Screen showing the order statistics of a single key."""

    BINDINGS = [
        Binding("escape", "pop_screen", "Back"),
        Binding("q", "pop_screen", "Back"),
    ]

    CSS = """
    KeyDetailScreen {
        background: $surface;
    }

    .key-title {
        text-align: center;
        text-style: bold;
        padding: 1;
        background: $primary;
        color: $text;
        width: 100%;
    }

    #content {
        height: 100%;
        padding: 1 2;
    }
    """

    def __init__(self, word: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.word = word

    def compose(self) -> ComposeResult:
        yield Header()
        yield ScrollableContainer(id="content")
        yield Footer()

    def on_mount(self) -> None:
        container = self.query_one("#content")
        app = cast("TableExplorerApp", self.app)
        container.mount(Label(f"Key: {self.word}", classes="key-title"))
        container.mount(Static(key_summary(app.counter.table, self.word)))


class TreeScreen(Screen):
    """Screen rendering the whole tree."""

    BINDINGS = [
        Binding("escape", "pop_screen", "Back"),
        Binding("q", "pop_screen", "Back"),
    ]

    def compose(self) -> ComposeResult:
        yield Header()
        yield ScrollableContainer(id="content")
        yield Footer()

    def on_mount(self) -> None:
        app = cast("TableExplorerApp", self.app)
        table = app.counter.table
        self.query_one("#content").mount(
            Static(table_to_rich_tree(table, type(table).__name__))
        )


class KeyListScreen(Screen):
    """Main screen listing every key with its count."""

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("enter", "select_key", "View Key"),
        Binding("t", "show_tree", "Show Tree"),
    ]

    CSS = """
    KeyListScreen {
        background: $surface;
    }

    #summary {
        padding: 0 1;
        color: $text-muted;
    }

    DataTable {
        height: 1fr;
    }

    DataTable > .datatable--header {
        text-style: bold;
        background: $primary;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        yield Label(id="summary")
        yield DataTable(id="key-table")
        yield Footer()

    def on_mount(self) -> None:
        app = cast("TableExplorerApp", self.app)
        counter = app.counter

        self.query_one("#summary", Label).update(
            f"{counter.words} words, {counter.distinct} distinct, "
            f"most frequent: {counter.max!r} ({counter.frequency}), "
            f"average put cost: {counter.statistics().average_put_cost:.2f}"
        )

        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.add_columns("Key", "Count", "Rank")
        for rank, key in enumerate(counter.table.keys()):
            table.add_row(key, str(counter.table.get(key)), str(rank), key=key)

    def get_selected_key(self) -> str | None:
        table = self.query_one(DataTable)
        if table.row_count == 0:
            return None
        return str(table.get_cell_at(Coordinate(table.cursor_row, 0)))

    def action_select_key(self) -> None:
        key = self.get_selected_key()
        if key is not None:
            self.app.push_screen(KeyDetailScreen(key))

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        if event.row_key.value is not None:
            self.app.push_screen(KeyDetailScreen(str(event.row_key.value)))

    def action_show_tree(self) -> None:
        self.app.push_screen(TreeScreen())


class TableExplorerApp(App):
    """TUI application for exploring a word frequency symbol table."""

    TITLE = "Symbol Table Explorer"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "toggle_dark", "Toggle Dark Mode"),
    ]

    def __init__(self, counter: FrequencyCounter, source: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self.counter = counter
        self.sub_title = source

    def on_mount(self) -> None:
        self.push_screen(KeyListScreen())

    def action_toggle_dark(self) -> None:
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"


def main():
    """Run the table explorer."""
    parser = argparse.ArgumentParser(description="Explore a word frequency table")
    parser.add_argument("path", help="Text file (or name of a bundled corpus)")
    parser.add_argument("--min-length", type=int, default=MIN_LENGTH)
    parser.add_argument(
        "--table", choices=sorted(TABLE_FACTORIES), default=DEFAULT_TABLE
    )
    args = parser.parse_args()

    counter = FrequencyCounter.from_path(
        args.path, args.min_length, TABLE_FACTORIES[args.table]
    )
    TableExplorerApp(counter, source=str(args.path)).run()


if __name__ == "__main__":
    main()
