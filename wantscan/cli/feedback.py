"""Console feedback for scan results."""
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import LookupResult, ScanOutcome

# outcome -> (colour, title, bells)
FEEDBACK = {
    ScanOutcome.MATCH: ("green", "WANTED", 1),
    ScanOutcome.NO_MATCH: ("yellow", "Not wanted", 0),
    ScanOutcome.INVALID: ("red", "Invalid barcode", 2),
    ScanOutcome.ERROR: ("red", "Lookup failed", 2),
}


def render_result(result: LookupResult) -> Panel:
    """Build the panel shown after a scan."""
    colour, title, _ = FEEDBACK[result.outcome]

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="cyan bold", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Barcode", escape(result.barcode))

    if result.outcome == ScanOutcome.MATCH:
        table.add_row("Album", f"[bold]{escape(result.want.album)}[/bold]")
        table.add_row("Artist", f"by {escape(result.want.artist)}")
        table.add_row("Wants", escape(result.want.wants))
    else:
        table.add_row("Result", f"[{colour}]{escape(result.describe())}[/{colour}]")

    return Panel(table, title=f"[{colour}]{title}", border_style=colour)


def signal(console: Console, result: LookupResult, bell: bool = True):
    """Print the result panel and ring the terminal bell for it."""
    console.print(render_result(result))
    if bell:
        for _ in range(FEEDBACK[result.outcome][2]):
            console.bell()
