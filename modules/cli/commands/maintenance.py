"""
Maintenance Commands.

Examples:
    uptime-kuma maintenance add "DB upgrade" 2026-01-10T22:00:00Z 2026-01-11T02:00:00Z
"""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from modules.cli.client import call_api
from modules.cli.output import console, print_json, run, success

app = typer.Typer(help="Maintenance window commands", no_args_is_help=True)


@app.command("list")
def list_maintenance(
    as_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List maintenance windows, newest first."""
    windows = run(call_api("GET", "/maintenance"))
    if as_json:
        print_json(windows)
        return

    table = Table(show_header=True)
    for column in ("ID", "Title", "Start", "End", "Active"):
        table.add_column(column)
    for window in windows:
        table.add_row(
            str(window["id"]),
            escape(window["title"]),
            window["start_date"],
            window["end_date"],
            "Yes" if window["active"] else "No",
        )
    console.print(table)


@app.command("add")
def add_maintenance(
    title: str = typer.Argument(..., help="Title"),
    start: str = typer.Argument(..., help="Start (ISO 8601)"),
    end: str = typer.Argument(..., help="End (ISO 8601)"),
    description: Optional[str] = typer.Option(None, "--description", help="Description"),
    inactive: bool = typer.Option(False, "--inactive", help="Create the window disabled"),
) -> None:
    """Create a maintenance window."""
    payload = {"title": title, "start_date": start, "end_date": end, "active": not inactive}
    if description is not None:
        payload["description"] = description

    window = run(call_api("POST", "/maintenance", json=payload))
    success(f"Maintenance {window['title']} created (ID: {window['id']})")
