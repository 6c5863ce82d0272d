"""
Monitor Commands.

One HTTP call per invocation (``import`` makes one per record).

Examples:
    uptime-kuma list
    uptime-kuma add "Homepage" https://example.com -i 30
    uptime-kuma add-tcp db-check 10.0.0.5 5432
    uptime-kuma delete 7 --force
    uptime-kuma export monitors.json
"""

import json
from pathlib import Path
from typing import Any, Optional

import typer
from rich.markup import escape
from rich.table import Table

from modules.cli.client import ApiError, call_api, get_api_client
from modules.cli.output import abort, console, format_status, print_json, run, success

# Fields the server assigns; dropped on export so the file re-imports
SERVER_FIELDS = ("id", "user_id", "latestHeartbeat")


def _parse_headers(headers: str | None) -> dict[str, Any] | None:
    if headers is None:
        return None
    try:
        parsed = json.loads(headers)
    except json.JSONDecodeError:
        abort("Invalid JSON for headers")
    if not isinstance(parsed, dict):
        abort("Invalid JSON for headers")
    return parsed


def list_monitors(
    as_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List all monitors."""
    monitors = run(call_api("GET", "/monitors"))

    if as_json:
        print_json(monitors)
        return

    table = Table(show_header=True)
    for column in ("ID", "Name", "Type", "URL/Host", "Status", "Uptime", "Response"):
        table.add_column(column)

    for monitor in monitors:
        heartbeat = monitor.get("latestHeartbeat") or {}
        # The API does not compute uptime; a host scheduler may add it to the heartbeat
        uptime = heartbeat.get("uptime")
        ping = heartbeat.get("ping")
        table.add_row(
            str(monitor["id"]),
            escape(monitor["name"]),
            monitor["type"],
            escape(monitor.get("url") or monitor.get("hostname") or "-"),
            format_status(heartbeat.get("status")),
            f"{uptime}%" if uptime is not None else "-",
            f"{ping}ms" if ping else "-",
        )

    console.print(table)


def add_monitor(
    name: str = typer.Argument(..., help="Monitor name"),
    url: str = typer.Argument(..., help="URL or host to check"),
    monitor_type: str = typer.Option("http", "--type", "-t", help="Monitor type"),
    interval: int = typer.Option(60, "--interval", "-i", help="Check interval in seconds"),
    method: str = typer.Option("GET", "--method", "-m", help="HTTP method"),
    keyword: Optional[str] = typer.Option(None, "--keyword", "-k", help="Keyword to check"),
    retries: int = typer.Option(0, "--retries", "-r", help="Number of retries"),
    headers: Optional[str] = typer.Option(None, "--headers", help="HTTP headers as JSON string"),
) -> None:
    """Add a new monitor."""
    payload: dict[str, Any] = {
        "name": name,
        "url": url,
        "type": monitor_type,
        "interval": interval,
        "method": method,
        "maxretries": retries,
        "active": True,
    }
    if keyword:
        payload["keyword"] = keyword
        payload["type"] = "keyword"

    parsed_headers = _parse_headers(headers)
    if parsed_headers is not None:
        payload["headers"] = parsed_headers

    monitor = run(call_api("POST", "/monitors", json=payload))

    success("Monitor added successfully")
    console.print(f"ID: {monitor['id']}")
    console.print(f"Name: {escape(monitor['name'])}")
    console.print(f"URL: {escape(monitor['url'])}")


def add_http(
    name: str = typer.Argument(..., help="Monitor name"),
    url: str = typer.Argument(..., help="URL to check"),
    interval: int = typer.Option(60, "--interval", "-i", help="Check interval in seconds"),
) -> None:
    """Quick add HTTP monitor."""
    add_monitor(name, url, monitor_type="http", interval=interval,
                method="GET", keyword=None, retries=0, headers=None)


def add_ping(
    name: str = typer.Argument(..., help="Monitor name"),
    hostname: str = typer.Argument(..., help="Host to ping"),
    interval: int = typer.Option(60, "--interval", "-i", help="Check interval in seconds"),
) -> None:
    """Quick add Ping monitor."""
    add_monitor(name, hostname, monitor_type="ping", interval=interval,
                method="GET", keyword=None, retries=0, headers=None)


def add_tcp(
    name: str = typer.Argument(..., help="Monitor name"),
    hostname: str = typer.Argument(..., help="Host to connect to"),
    port: int = typer.Argument(..., help="TCP port"),
    interval: int = typer.Option(60, "--interval", "-i", help="Check interval in seconds"),
) -> None:
    """Quick add TCP port monitor."""
    add_monitor(name, f"{hostname}:{port}", monitor_type="tcp", interval=interval,
                method="GET", keyword=None, retries=0, headers=None)


def delete_monitor(
    monitor_id: int = typer.Argument(..., help="Monitor ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a monitor."""
    if not force:
        console.print("[yellow]This will permanently delete the monitor and all its data.[/yellow]")
        console.print("[yellow]Use -f or --force to skip this confirmation.[/yellow]")
        return

    run(call_api("DELETE", f"/monitors/{monitor_id}"))
    success("Monitor deleted successfully")


def pause_monitor(monitor_id: int = typer.Argument(..., help="Monitor ID")) -> None:
    """Pause a monitor."""
    run(call_api("POST", f"/monitors/{monitor_id}/pause"))
    success("Monitor paused")


def resume_monitor(monitor_id: int = typer.Argument(..., help="Monitor ID")) -> None:
    """Resume a monitor."""
    run(call_api("POST", f"/monitors/{monitor_id}/resume"))
    success("Monitor resumed")


def get_monitor(
    monitor_id: int = typer.Argument(..., help="Monitor ID"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Get monitor details."""
    monitor = run(call_api("GET", f"/monitors/{monitor_id}"))

    if as_json:
        print_json(monitor)
        return

    active = "[green]Yes[/green]" if monitor["active"] else "[red]No[/red]"
    console.print("\n[bold]Monitor Details:[/bold]")
    console.print(f"ID: {monitor['id']}")
    console.print(f"Name: {escape(monitor['name'])}")
    console.print(f"Type: {monitor['type']}")
    console.print(f"URL: {escape(monitor.get('url') or monitor.get('hostname') or '-')}")
    console.print(f"Interval: {monitor['interval']}s")
    console.print(f"Active: {active}")

    heartbeat = monitor.get("latestHeartbeat")
    if heartbeat:
        console.print("\n[bold]Latest Status:[/bold]")
        console.print(f"Status: {format_status(heartbeat['status'])}")
        console.print(f"Message: {escape(heartbeat.get('msg') or '-')}")
        console.print(f"Response Time: {str(heartbeat['ping']) + 'ms' if heartbeat.get('ping') else '-'}")
        console.print(f"Time: {heartbeat['time']}")


def update_monitor(
    monitor_id: int = typer.Argument(..., help="Monitor ID"),
    name: Optional[str] = typer.Option(None, "--name", help="New name"),
    url: Optional[str] = typer.Option(None, "--url", help="New URL or host"),
    interval: Optional[int] = typer.Option(None, "--interval", "-i", help="Check interval in seconds"),
    retries: Optional[int] = typer.Option(None, "--retries", "-r", help="Number of retries"),
    active: Optional[bool] = typer.Option(None, "--active/--inactive", help="Start or stop checking"),
    headers: Optional[str] = typer.Option(None, "--headers", help="HTTP headers as JSON string"),
) -> None:
    """Update selected fields of a monitor."""
    payload: dict[str, Any] = {}
    if name is not None:
        payload["name"] = name
    if url is not None:
        payload["url"] = url
    if interval is not None:
        payload["interval"] = interval
    if retries is not None:
        payload["maxretries"] = retries
    if active is not None:
        payload["active"] = active
    parsed_headers = _parse_headers(headers)
    if parsed_headers is not None:
        payload["headers"] = parsed_headers

    if not payload:
        abort("Nothing to update")

    monitor = run(call_api("PUT", f"/monitors/{monitor_id}", json=payload))
    success(f"Monitor {monitor['id']} updated")


def list_heartbeats(
    monitor_id: int = typer.Argument(..., help="Monitor ID"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum heartbeats to show"),
    offset: Optional[int] = typer.Option(None, "--offset", help="Heartbeats to skip"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show a monitor's recent heartbeats, newest first."""
    params = {}
    if limit is not None:
        params["limit"] = limit
    if offset is not None:
        params["offset"] = offset

    heartbeats = run(call_api("GET", f"/monitors/{monitor_id}/heartbeats", params=params))

    if as_json:
        print_json(heartbeats)
        return

    table = Table(show_header=True)
    for column in ("Time", "Status", "Response", "Message"):
        table.add_column(column)
    for hb in heartbeats:
        table.add_row(
            hb["time"],
            format_status(hb["status"]),
            f"{hb['ping']}ms" if hb.get("ping") else "-",
            escape(hb.get("msg") or "-"),
        )
    console.print(table)


def import_monitors(
    file: Path = typer.Argument(..., help="JSON file with one monitor or an array of monitors"),
) -> None:
    """Import monitors from JSON file."""
    try:
        data = json.loads(file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        abort(str(e))

    monitors = data if isinstance(data, list) else [data]
    console.print(f"Importing {len(monitors)} monitor(s)...")

    succeeded, failed = run(_import(monitors))
    console.print(f"\nImport complete: {succeeded} succeeded, {failed} failed")


async def _import(monitors: list[Any]) -> tuple[int, int]:
    """POST each record in order; a failed record does not stop the rest."""
    client = get_api_client()
    succeeded = failed = 0
    try:
        for monitor in monitors:
            label = escape(str(monitor.get("name") if isinstance(monitor, dict) else monitor))
            try:
                await client.post("/monitors", json=monitor)
            except ApiError as e:
                console.print(f"[red]✗ {label}: {escape(e.message)}[/red]")
                failed += 1
            else:
                console.print(f"[green]✓ {label}[/green]")
                succeeded += 1
    finally:
        await client.close()
    return succeeded, failed


def export_monitors(
    file: Optional[Path] = typer.Argument(None, help="Output file (stdout when omitted)"),
) -> None:
    """Export monitors to JSON file."""
    monitors = run(call_api("GET", "/monitors"))
    exported = [
        {key: value for key, value in monitor.items() if key not in SERVER_FIELDS}
        for monitor in monitors
    ]

    if file is None:
        print_json(exported)
        return

    try:
        file.write_text(json.dumps(exported, indent=2), encoding="utf-8")
    except OSError as e:
        abort(str(e))
    success(f"Exported {len(exported)} monitors to {file}")
