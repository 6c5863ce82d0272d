"""
Status Page Commands.
"""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from modules.cli.client import call_api
from modules.cli.output import console, format_status, print_json, run, success

app = typer.Typer(help="Status page commands", no_args_is_help=True)


@app.command("list")
def list_status_pages(
    as_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List status pages."""
    pages = run(call_api("GET", "/status-pages"))
    if as_json:
        print_json(pages)
        return

    table = Table(show_header=True)
    for column in ("ID", "Slug", "Title", "Published"):
        table.add_column(column)
    for page in pages:
        table.add_row(
            str(page["id"]),
            escape(page["slug"]),
            escape(page["title"]),
            "Yes" if page["published"] else "No",
        )
    console.print(table)


@app.command("get")
def get_status_page(
    slug: str = typer.Argument(..., help="Status page slug"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show a status page and its monitors."""
    page = run(call_api("GET", f"/status-pages/{slug}"))
    if as_json:
        print_json(page)
        return

    console.print(f"\n[bold]{escape(page['title'])}[/bold] ({escape(page['slug'])})")
    if page.get("description"):
        console.print(escape(page["description"]))

    table = Table(show_header=True)
    for column in ("ID", "Name", "Type", "Status"):
        table.add_column(column)
    for monitor in page.get("monitors", []):
        heartbeat = monitor.get("latestHeartbeat") or {}
        table.add_row(
            str(monitor["id"]),
            escape(monitor["name"]),
            monitor["type"],
            format_status(heartbeat.get("status")),
        )
    console.print(table)


@app.command("add")
def add_status_page(
    slug: str = typer.Argument(..., help="URL slug (letters, digits, dashes)"),
    title: str = typer.Argument(..., help="Title"),
    description: Optional[str] = typer.Option(None, "--description", help="Description"),
    monitor: Optional[list[int]] = typer.Option(None, "--monitor", "-m", help="Monitor ID to show (repeatable)"),
) -> None:
    """Create a status page."""
    payload = {"slug": slug, "title": title, "monitor_ids": monitor or []}
    if description is not None:
        payload["description"] = description

    page = run(call_api("POST", "/status-pages", json=payload))
    success(f"Status page {page['slug']} created (ID: {page['id']})")
