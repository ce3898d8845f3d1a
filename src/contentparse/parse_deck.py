"""Parse Deck - a TUI for parsing content trees interactively."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widgets import (
    Button,
    DataTable,
    DirectoryTree,
    Footer,
    Header,
    Input,
    Label,
    Log,
    ProgressBar,
    Rule,
    Static,
)

from contentparse.errors import ContentParseError
from contentparse.ingesters import get_ingester, supported_sources
from contentparse.models import ItemType, SourceItem
from contentparse.parsing import Parser

TYPE_COLORS = {
    ItemType.REPOSITORY.value: "magenta",
    ItemType.LOCATION.value: "yellow",
    ItemType.DOCUMENT.value: "blue",
    ItemType.PRESENTATION.value: "cyan",
    ItemType.MESSAGE.value: "green",
}


@dataclass
class ParseStats:
    """Statistics tracked while parsing a source."""

    items_discovered: int = 0
    items_parsed: int = 0
    items_failed: int = 0
    files_attached: int = 0
    type_counts: Counter = field(default_factory=Counter)
    current_item: str = ""
    status: str = "idle"
    start_time: datetime | None = None
    end_time: datetime | None = None

    @property
    def items_done(self) -> int:
        return self.items_parsed + self.items_failed

    @property
    def elapsed(self) -> str:
        if not self.start_time:
            return "00:00"
        end = self.end_time or datetime.now()
        minutes, seconds = divmod(int((end - self.start_time).total_seconds()), 60)
        return f"{minutes:02d}:{seconds:02d}"

    @property
    def rate(self) -> str:
        if not self.start_time or self.items_done == 0:
            return "-- items/s"
        end = self.end_time or datetime.now()
        elapsed = (end - self.start_time).total_seconds()
        if elapsed == 0:
            return "-- items/s"
        return f"{self.items_done / elapsed:.1f} items/s"

    def copy(self) -> ParseStats:
        """Create a snapshot safe to hand to the UI thread."""
        return ParseStats(
            items_discovered=self.items_discovered,
            items_parsed=self.items_parsed,
            items_failed=self.items_failed,
            files_attached=self.files_attached,
            type_counts=Counter(self.type_counts),
            current_item=self.current_item,
            status=self.status,
            start_time=self.start_time,
            end_time=self.end_time,
        )


class StatsPanel(Static):
    """Real-time statistics display."""

    def compose(self) -> ComposeResult:
        yield Static(id="stats-content")

    def on_mount(self) -> None:
        self.update_display(ParseStats())

    def update_display(self, stats: ParseStats) -> None:
        content = self.query_one("#stats-content", Static)
        status_color = {
            "idle": "dim",
            "running": "green",
            "complete": "cyan",
            "error": "red",
        }.get(stats.status, "white")

        types = "\n".join(
            f"  {item_type.value:<12}[{TYPE_COLORS[item_type.value]}]"
            f"{stats.type_counts.get(item_type.value, 0):,}[/]"
            for item_type in ItemType
        )

        content.update(f"""[b]STATUS[/b]  [{status_color}]{stats.status.upper()}[/]

[b]TIME[/b]    {stats.elapsed}  {stats.rate}

[b]ITEMS[/b]
  Discovered  [cyan]{stats.items_discovered:,}[/]
  Parsed      [green]{stats.items_parsed:,}[/]
  Failed      [red]{stats.items_failed:,}[/]
  Files       [dim]{stats.files_attached:,}[/]

[b]TYPES[/b]
{types}""")


class CurrentItemDisplay(Static):
    """Display for the item being parsed."""

    def compose(self) -> ComposeResult:
        yield Static("[dim]Waiting for source...[/]", id="current-item-content")

    def update_item(self, route: str) -> None:
        content = self.query_one("#current-item-content", Static)
        if route:
            display = route if len(route) < 50 else "..." + route[-47:]
            content.update(f"[bold cyan]>[/] {display}")
        else:
            content.update("[dim]Waiting for source...[/]")


class ItemTable(DataTable):
    """Parsed items as a table."""

    def on_mount(self) -> None:
        self.add_columns("Route", "Type", "Title", "Files")
        self.cursor_type = "row"

    def add_item(self, route: str, item_type: str | None, title: str, files: int) -> None:
        if item_type is None:
            type_str = "[red]failed[/]"
        else:
            type_str = f"[{TYPE_COLORS[item_type]}]{item_type}[/]"
        if len(title) > 40:
            title = title[:37] + "..."
        self.add_row("/" + route, type_str, title, str(files))
        self.scroll_end()


class DeckLogHandler(logging.Handler):
    """Forward parser log records into the deck's system log."""

    def __init__(self, app: ParseDeck):
        super().__init__(level=logging.INFO)
        self.app = app

    def emit(self, record: logging.LogRecord) -> None:
        color = "yellow" if record.levelno == logging.WARNING else "red"
        if record.levelno < logging.WARNING:
            color = "dim"
        self.app.post_message(ParseDeck.LogMessage(f"[{color}]{self.format(record)}[/]"))


class ParseDeck(App):
    """The contentparse Parse Deck."""

    # Messages for thread-safe communication
    class StatsUpdated(Message):
        def __init__(self, stats: ParseStats) -> None:
            self.stats = stats
            super().__init__()

    class LogMessage(Message):
        def __init__(self, message: str) -> None:
            self.message = message
            super().__init__()

    class ItemParsed(Message):
        def __init__(self, route: str, item_type: str | None, title: str, files: int) -> None:
            self.route = route
            self.item_type = item_type
            self.title = title
            self.files = files
            super().__init__()

    CSS = """
    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 35;
        background: $surface-darken-1;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 1fr;
        padding: 1;
    }

    #right-panel {
        width: 30;
        background: $surface-darken-1;
        border-left: solid $primary-darken-2;
        padding: 1;
    }

    StatsPanel {
        height: auto;
        padding: 1;
        background: $surface-darken-2;
        border: round $primary;
        margin-bottom: 1;
    }

    CurrentItemDisplay {
        height: 3;
        padding: 1;
        background: $boost;
        border: round $secondary;
        margin-bottom: 1;
    }

    #source-input {
        margin-bottom: 1;
    }

    #action-buttons {
        layout: horizontal;
        height: 3;
    }

    #action-buttons Button {
        margin-right: 1;
    }

    ItemTable {
        height: 1fr;
        border: round $primary-darken-1;
    }

    #progress-bar {
        width: 100%;
        height: 1;
        margin-bottom: 1;
    }

    #log-panel {
        height: 12;
        border: round $primary-darken-2;
        background: $surface-darken-2;
    }

    .section-title {
        text-style: bold;
        margin-bottom: 1;
    }

    DirectoryTree {
        height: 100%;
        border: round $primary-darken-1;
        background: $surface-darken-2;
    }
    """

    BINDINGS = [
        Binding("p", "parse", "Parse", show=True),
        Binding("c", "clear", "Clear", show=True),
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "toggle_dark", "Toggle Dark Mode"),
    ]

    TITLE = "contentparse Parse Deck"
    SUB_TITLE = "Content Classification Console"

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            # Left panel - Stats & Controls
            with Vertical(id="left-panel"):
                yield Label("PARSE CONTROL", classes="section-title")
                yield StatsPanel()
                yield CurrentItemDisplay()
                yield Rule()
                yield Label("Source Path")
                yield Input(placeholder="Enter folder or .zip path...", id="source-input")
                with Horizontal(id="action-buttons"):
                    yield Button("PARSE", id="parse-btn", variant="success")
                    yield Button("Clear", id="clear-btn", variant="warning")

            # Center panel - Parsed items
            with Vertical(id="center-panel"):
                yield Label("PARSED ITEMS", classes="section-title")
                yield ProgressBar(id="progress-bar", show_eta=False)
                yield ItemTable(id="item-table")
                yield Rule()
                yield Label("SYSTEM LOG", classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

            # Right panel - Directory browser
            with Vertical(id="right-panel"):
                yield Label("FILE BROWSER", classes="section-title")
                yield DirectoryTree(Path.cwd(), id="dir-tree")

        yield Footer()

    def on_mount(self) -> None:
        self._log("Parse Deck initialized")
        self._log("Enter a source path and press PARSE to begin")

    def _log(self, message: str) -> None:
        """Add a message to the system log."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    # Message handlers for thread-safe updates
    def on_parse_deck_stats_updated(self, event: StatsUpdated) -> None:
        stats = event.stats
        self.query_one(StatsPanel).update_display(stats)
        self.query_one(CurrentItemDisplay).update_item(stats.current_item)
        if stats.items_discovered > 0:
            self.query_one("#progress-bar", ProgressBar).update(
                total=stats.items_discovered, progress=stats.items_done
            )

    def on_parse_deck_log_message(self, event: LogMessage) -> None:
        self._log(event.message)

    def on_parse_deck_item_parsed(self, event: ItemParsed) -> None:
        self.query_one("#item-table", ItemTable).add_item(
            event.route, event.item_type, event.title, event.files
        )

    def on_directory_tree_directory_selected(
        self, event: DirectoryTree.DirectorySelected
    ) -> None:
        self.query_one("#source-input", Input).value = str(event.path)

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        self.query_one("#source-input", Input).value = str(event.path)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "parse-btn":
            self.action_parse()
        elif event.button.id == "clear-btn":
            self.action_clear()

    def action_toggle_dark(self) -> None:
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"

    def action_clear(self) -> None:
        """Clear the tables and reset stats."""
        self.query_one(StatsPanel).update_display(ParseStats())
        self.query_one(CurrentItemDisplay).update_item("")
        self.query_one("#item-table", ItemTable).clear()
        self.query_one("#log-panel", Log).clear()
        self.query_one("#progress-bar", ProgressBar).update(total=None, progress=0)
        self._log("Cleared - ready for new run")

    def action_parse(self) -> None:
        source = self.query_one("#source-input", Input).value.strip()
        if not source:
            self._log("[red]ERROR: No source path specified[/]")
            return
        self.run_parse(source)

    @work(exclusive=True, thread=True)
    def run_parse(self, source: str) -> None:
        """Parse every item of the source in a background thread."""
        source_path = Path(source)
        stats = ParseStats(status="running", start_time=datetime.now())
        self.post_message(self.LogMessage(f"Loading source: {source}"))

        ingester = get_ingester(source_path)
        if ingester is None:
            stats.status = "error"
            self.post_message(self.StatsUpdated(stats.copy()))
            self.post_message(
                self.LogMessage(
                    f"[red]ERROR: Unsupported source (use {' or '.join(supported_sources())})[/]"
                )
            )
            return

        self.post_message(self.LogMessage(f"Ingester: {ingester.source_type}"))

        parser_logger = logging.getLogger("contentparse.parse_deck.parser")
        parser_logger.propagate = False
        handler = DeckLogHandler(self)
        parser_logger.addHandler(handler)
        parser = Parser(logger=parser_logger)

        try:
            sources: list[SourceItem] = list(ingester.ingest(source_path))
            stats.items_discovered = len(sources)
            self.post_message(self.StatsUpdated(stats.copy()))
            self.post_message(self.LogMessage(f"Found {stats.items_discovered} items"))

            for source_item in sources:
                stats.current_item = source_item.route or "/"
                try:
                    item = parser.parse(source_item)
                except ContentParseError as err:
                    stats.items_failed += 1
                    self.post_message(self.LogMessage(f"[red]{err}[/]"))
                    self.post_message(self.ItemParsed(source_item.route, None, "", 0))
                else:
                    stats.items_parsed += 1
                    stats.files_attached += len(item.files)
                    stats.type_counts[item.type.value] += 1
                    self.post_message(
                        self.ItemParsed(
                            item.route.value, item.type.value, item.title, len(item.files)
                        )
                    )
                self.post_message(self.StatsUpdated(stats.copy()))
        finally:
            parser_logger.removeHandler(handler)

        stats.status = "complete"
        stats.current_item = ""
        stats.end_time = datetime.now()
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(
            self.LogMessage(
                f"[cyan]COMPLETE: {stats.items_parsed} parsed, {stats.items_failed} failed[/]"
            )
        )


def main() -> None:
    """Run the Parse Deck TUI."""
    app = ParseDeck()
    app.run()


if __name__ == "__main__":
    main()
