"""CLI tool for checking record barcodes against the wants list.

Examples:
    # Interactive scanning against the remote API (credentials from .env or prompt)
    wantscan scan

    # Interactive scanning against a CSV export
    wantscan scan --csv wants.csv

    # One-shot lookups
    wantscan lookup 0602527347122 "5 099902 98742"

    # Inspect a CSV export
    wantscan load wants.csv

    # Run the HTTP service
    wantscan serve
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import settings
from ..models import LookupSource, ScanOutcome
from ..services import Scanner, WantList, WantsClient
from ..utils.logger import logger
from .feedback import signal

app = typer.Typer(help="Check record barcodes against the wants list.")
console = Console()

QUIT_WORDS = {"q", "quit", "exit"}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show log output"),
):
    """Record-store wants scanner."""
    level = logging.DEBUG if verbose else logging.CRITICAL
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def resolve_csv(csv: Optional[Path], offline: bool) -> Optional[Path]:
    """Pick the CSV to use, or None for online lookups."""
    if csv is not None:
        return csv
    if offline or settings.source == LookupSource.OFFLINE:
        if settings.wants_csv is None:
            console.print("[red]Offline mode needs --csv or WANTSCAN_WANTS_CSV_PATH[/red]")
            raise typer.Exit(1)
        return settings.wants_csv
    return None


@asynccontextmanager
async def open_scanner(
    csv: Optional[Path],
    base_url: Optional[str],
    username: Optional[str],
    password: Optional[str],
) -> AsyncIterator[Scanner]:
    """Yield a scanner that is ready to scan.

    Offline: the CSV is loaded. Online: a session is opened and logged in.
    Exits with code 1 if either step fails.
    """
    if csv is not None:
        scanner = Scanner(source=LookupSource.OFFLINE)
        console.print("[cyan]Loading barcodes...[/cyan]")
        try:
            count = scanner.load_csv(csv)
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Error loading file: {escape(str(e))}[/red]")
            raise typer.Exit(1)
        console.print(f"[green]Loaded {count} barcodes![/green]")
        yield scanner
        return

    base_url = base_url or settings.base_url
    if not base_url:
        console.print("[red]No wants API configured. Set WANTSCAN_BASE_URL or pass --base-url.[/red]")
        raise typer.Exit(1)

    username = username or settings.username or typer.prompt("Username")
    password = password or settings.password or typer.prompt("Password", hide_input=True)

    async with WantsClient(base_url=base_url) as client:
        scanner = Scanner(source=LookupSource.ONLINE, client=client)
        with console.status("[cyan]Logging in..."):
            result = await scanner.login(username, password)

        if not result.ok:
            console.print(f"[red]Login failed: {escape(result.error_message or 'unknown error')}[/red]")
            raise typer.Exit(1)

        console.print(f"[green]Logged in as[/green] {escape(username)}")
        yield scanner


@app.command()
def scan(
    csv: Optional[Path] = typer.Option(None, "--csv", help="Wants CSV export to match against"),
    offline: bool = typer.Option(False, "--offline", help="Use the configured CSV instead of the API"),
    base_url: Optional[str] = typer.Option(None, help="Wants site root URL"),
    username: Optional[str] = typer.Option(None, help="Account name"),
    password: Optional[str] = typer.Option(None, help="Account password"),
    bell: bool = typer.Option(True, "--bell/--no-bell", help="Ring the terminal bell on results"),
):
    """
    Scan barcodes interactively until an empty line, 'q' or end of input.
    """
    csv_path = resolve_csv(csv, offline)

    async def run():
        async with open_scanner(csv_path, base_url, username, password) as scanner:
            console.print("\n[bold cyan]Ready.[/bold cyan] Scan or type a barcode ('q' to quit).\n")
            while True:
                try:
                    raw = console.input("[bold]Barcode>[/bold] ")
                except (EOFError, KeyboardInterrupt):
                    break

                raw = raw.strip()
                if not raw or raw.lower() in QUIT_WORDS:
                    break

                result = await scanner.scan(raw)
                signal(console, result, bell=bell)

    asyncio.run(run())


@app.command()
def lookup(
    barcodes: List[str] = typer.Argument(..., help="Barcodes to check"),
    csv: Optional[Path] = typer.Option(None, "--csv", help="Wants CSV export to match against"),
    offline: bool = typer.Option(False, "--offline", help="Use the configured CSV instead of the API"),
    base_url: Optional[str] = typer.Option(None, help="Wants site root URL"),
    username: Optional[str] = typer.Option(None, help="Account name"),
    password: Optional[str] = typer.Option(None, help="Account password"),
):
    """
    Look up one or more barcodes and exit.

    Exits with code 1 if any barcode was invalid or could not be looked up.
    """
    csv_path = resolve_csv(csv, offline)

    async def run() -> bool:
        clean = True
        async with open_scanner(csv_path, base_url, username, password) as scanner:
            for raw in barcodes:
                result = await scanner.scan(raw)
                signal(console, result, bell=False)
                if result.outcome in (ScanOutcome.INVALID, ScanOutcome.ERROR):
                    clean = False
        return clean

    if not asyncio.run(run()):
        raise typer.Exit(1)


@app.command()
def load(
    csv: Path = typer.Argument(..., help="Wants CSV export"),
    limit: int = typer.Option(10, help="Number of rows to preview"),
):
    """
    Parse a wants CSV export and show what would be matched.
    """
    want_list = WantList()
    try:
        count = want_list.load_csv(csv)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error loading file: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not count:
        console.print("[yellow]No usable rows found.[/yellow]")
        return

    table = Table(title=f"Wants in {csv.name} ({count})")
    table.add_column("Barcode", style="cyan", no_wrap=True)
    table.add_column("Artist", style="white")
    table.add_column("Album", style="green")
    table.add_column("Wants", style="yellow", justify="right")

    for want in list(want_list)[:limit]:
        table.add_row(
            escape(want.barcode), escape(want.artist), escape(want.album), escape(want.wants)
        )

    console.print(table)
    if count > limit:
        console.print(f"  ... and {count - limit} more")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Bind port"),
):
    """
    Run the lookup HTTP service.
    """
    import uvicorn

    uvicorn.run(
        "wantscan.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=settings.debug,
        log_level="info",
    )


if __name__ == "__main__":
    app()
