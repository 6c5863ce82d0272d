"""
Tag Commands.
"""

import typer
from rich.markup import escape
from rich.table import Table

from modules.cli.client import call_api
from modules.cli.output import console, print_json, run, success

app = typer.Typer(help="Tag commands", no_args_is_help=True)


@app.command("list")
def list_tags(
    as_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List tags."""
    tags = run(call_api("GET", "/tags"))
    if as_json:
        print_json(tags)
        return

    table = Table(show_header=True)
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Color")
    for tag in tags:
        table.add_row(str(tag["id"]), escape(tag["name"]), escape(tag["color"]))
    console.print(table)


@app.command("add")
def add_tag(
    name: str = typer.Argument(..., help="Tag name"),
    color: str = typer.Argument(..., help="Color, e.g. #FF5733"),
) -> None:
    """Create a tag."""
    tag = run(call_api("POST", "/tags", json={"name": name, "color": color}))
    success(f"Tag {tag['name']} created (ID: {tag['id']})")
