"""
CLI Output Helpers.

Shared Rich consoles, status formatting and the error boundary every
command runs through: an ApiError or config problem prints
``Error: <message>`` to stderr and exits with status 1.
"""

import asyncio
import json
from collections.abc import Coroutine
from typing import Any, NoReturn, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from modules.cli.client import ApiError
from modules.cli.config import CliConfigError

T = TypeVar("T")

console = Console()
err_console = Console(stderr=True)

_STATUS_LABELS = {
    0: ("red", "DOWN"),
    1: ("green", "UP"),
    2: ("yellow", "PENDING"),
    3: ("blue", "MAINTENANCE"),
}


def format_status(status: int | None) -> str:
    """Rich markup for a heartbeat status code."""
    color, label = _STATUS_LABELS.get(status, ("bright_black", "UNKNOWN"))
    return f"[{color}]● {label}[/{color}]"


def abort(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a command coroutine, turning client failures into exit status 1."""
    try:
        return asyncio.run(coro)
    except (ApiError, CliConfigError) as e:
        abort(str(e))


def print_json(data: Any) -> None:
    """Raw JSON to stdout, unstyled so it can be piped."""
    typer.echo(json.dumps(data, indent=2))


def success(message: str) -> None:
    console.print(f"[green]✓ {escape(message)}[/green]")
