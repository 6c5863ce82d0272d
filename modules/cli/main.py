"""
Uptime Kuma CLI.

Command-line client for the Uptime Kuma REST API.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    uptime-kuma config -u http://localhost:3001 -U admin -p secret
    uptime-kuma list
    uptime-kuma get 3 --json
    uptime-kuma add-http "Homepage" https://example.com
    uptime-kuma import monitors.json
    uptime-kuma tag add production "#FF5733"
    uptime-kuma status-page get public

Options:
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --version         Show version and exit
"""

from importlib.metadata import PackageNotFoundError, version

import typer

from modules.cli.commands import maintenance_app, monitors, status_page_app, system, tag_app
from modules.cli.output import console

PACKAGE_NAME = "uptime-kuma-api"

app = typer.Typer(
    name="uptime-kuma",
    help="CLI for Uptime Kuma API",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("config")(system.configure)
app.command("info")(system.info)

app.command("list")(monitors.list_monitors)
app.command("ls", hidden=True)(monitors.list_monitors)
app.command("add")(monitors.add_monitor)
app.command("add-http")(monitors.add_http)
app.command("add-ping")(monitors.add_ping)
app.command("add-tcp")(monitors.add_tcp)
app.command("delete")(monitors.delete_monitor)
app.command("rm", hidden=True)(monitors.delete_monitor)
app.command("pause")(monitors.pause_monitor)
app.command("resume")(monitors.resume_monitor)
app.command("get")(monitors.get_monitor)
app.command("update")(monitors.update_monitor)
app.command("heartbeats")(monitors.list_heartbeats)
app.command("import")(monitors.import_monitors)
app.command("export")(monitors.export_monitors)

app.add_typer(tag_app, name="tag")
app.add_typer(maintenance_app, name="maintenance")
app.add_typer(status_page_app, name="status-page")


def _version_callback(value: bool) -> None:
    if not value:
        return
    try:
        current = version(PACKAGE_NAME)
    except PackageNotFoundError:
        current = "unknown"
    console.print(f"uptime-kuma {current}")
    raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Uptime Kuma CLI.

    Connection settings come from ~/.uptime-kuma-cli.json (see `config`).
    """
    from modules.backend.core.logging import setup_logging

    if debug:
        setup_logging(level="DEBUG", format_type="console", enable_file_logging=False)
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console", enable_file_logging=False)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
