"""Terminal table rendering of cycle results."""

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from service_monitor.core.address import format_server_print
from service_monitor.ports.endpoint import CycleEntry, CycleResult, Status

__all__ = ["TablePresenter", "build_table", "format_status"]

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
INDICATOR = "●"
STATUS_COLOURS = {
    Status.ACTIVE: "green",
    Status.INACTIVE: "red",
    Status.UNKNOWN: "yellow",
}


def format_status(status: Status) -> Text:
    """Status text followed by a coloured indicator glyph."""
    text = Text(f"{status.value} ")
    text.append(INDICATOR, style=STATUS_COLOURS[status])
    return text


def _row(entry: CycleEntry) -> tuple[Text, Text, Text, str]:
    # Addresses and labels are user input: never interpret them as markup
    return (
        Text(format_server_print(entry.endpoint.address)),
        Text(entry.endpoint.label),
        format_status(entry.status),
        entry.checked_at.strftime(TIMESTAMP_FORMAT),
    )


def build_table(result: CycleResult) -> Table:
    """Build the bordered status table for one cycle."""
    table = Table(title="Server Monitor", box=box.ASCII, show_lines=False)
    table.add_column("Server", no_wrap=True, min_width=12)
    table.add_column("App", min_width=18)
    table.add_column("Result", min_width=20)
    table.add_column("Last Checked", no_wrap=True, min_width=20)
    for entry in result:
        table.add_row(*_row(entry))
    return table


class TablePresenter:
    """Clear the terminal and draw the latest cycle."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(self, result: CycleResult) -> None:
        self.console.clear()
        self.console.print(build_table(result))
