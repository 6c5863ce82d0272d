"""
System Commands.

Connection setup and server information.
"""

from typing import Optional

import typer
from rich.markup import escape
from rich.panel import Panel

from modules.cli.client import call_api
from modules.cli.config import DEFAULT_URL, DEFAULT_USERNAME, CliAuth, CliConfig, CliConfigError, save_config
from modules.cli.output import abort, console, run, success


def configure(
    url: str = typer.Option(DEFAULT_URL, "--url", "-u", help="Uptime Kuma URL"),
    username: str = typer.Option(DEFAULT_USERNAME, "--username", "-U", help="Username"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Password or API key"),
) -> None:
    """
    Configure Uptime Kuma connection.

    Writes the settings file; does not contact the server.
    """
    config = CliConfig(url=url, auth=CliAuth(username=username, password=password or ""))
    try:
        path = save_config(config)
    except CliConfigError as e:
        abort(str(e))
    success(f"Configuration saved to {path}")


def info() -> None:
    """Show server version, monitor count and server time."""
    data = run(call_api("GET", "/info"))
    console.print(Panel(
        f"Version: {escape(str(data['version']))}\n"
        f"Monitors: {data['monitorCount']}\n"
        f"Server time: {data['serverTime']}",
        title="Uptime Kuma",
    ))
