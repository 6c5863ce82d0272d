#!/usr/bin/env python3
"""
Uptime Kuma API service runner.

Operational entry point for the API server (the end-user client is the
``uptime-kuma`` command). Use --service to select what to run.

Usage:
    python cli.py --help
    python cli.py --service server --verbose
    python cli.py --service server --action stop
    python cli.py --service init-db
    python cli.py --service create-user --username admin --password secret
    python cli.py --service health
    python cli.py --service test --test-type unit
"""

import asyncio
import os
import signal
import subprocess
import sys
import time
from pathlib import Path

import click
import structlog

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from modules.backend.core.config import validate_project_root
from modules.backend.core.logging import get_logger, setup_logging


def _find_process_on_port(port: int) -> list[int]:
    """Find PIDs listening on a port."""
    result = subprocess.run(
        ["lsof", "-ti", f":{port}"],
        capture_output=True, text=True,
    )
    return [int(p) for p in result.stdout.split() if p.strip()]


def _server_stop(logger, port: int) -> None:
    pids = _find_process_on_port(port)
    if not pids:
        click.echo(f"No server running on port {port}.")
        return

    for pid in pids:
        os.kill(pid, signal.SIGINT)
        logger.info("Sent SIGINT", extra={"pid": pid, "port": port})

    click.echo(f"Server on port {port} stopped (PID: {', '.join(str(p) for p in pids)}).")


def _server_status(port: int) -> None:
    pids = _find_process_on_port(port)
    if pids:
        click.echo(f"Server is running on port {port} (PID: {', '.join(str(p) for p in pids)}).")
    else:
        click.echo(f"Server is not running on port {port}.")


@click.command()
@click.option(
    "--service", "-s",
    type=click.Choice(["server", "init-db", "create-user", "health", "config", "test"]),
    default="server",
    help="Service or command to run.",
)
@click.option(
    "--action", "-a",
    type=click.Choice(["start", "stop", "restart", "status"]),
    default="start",
    help="Lifecycle action for the server.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output (INFO level logging).")
@click.option("--debug", "-d", is_flag=True, help="Enable debug output (DEBUG level logging).")
@click.option("--host", default=None, help="Server host.")
@click.option("--port", default=None, type=int, help="Server port.")
@click.option("--reload", is_flag=True, help="Enable auto-reload (server only).")
@click.option("--username", default=None, help="Username (create-user only).")
@click.option("--password", default=None, help="Password (create-user only).")
@click.option(
    "--test-type",
    type=click.Choice(["all", "unit", "integration"]),
    default="all",
    help="Test type to run.",
)
def main(
    service: str,
    action: str,
    verbose: bool,
    debug: bool,
    host: str | None,
    port: int | None,
    reload: bool,
    username: str | None,
    password: str | None,
    test_type: str,
) -> None:
    """
    Uptime Kuma API service runner.

    \b
    Examples:
        python cli.py --service server --reload --verbose
        python cli.py --service server --action status
        python cli.py --service init-db
        python cli.py --service create-user --username admin --password secret
        python cli.py --service health
        python cli.py --service config
        python cli.py --service test --test-type unit
    """
    validate_project_root()

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    setup_logging(level=log_level, format_type="console")
    structlog.contextvars.bind_contextvars(source="cli")
    logger = get_logger(__name__)
    logger.debug("CLI invoked", extra={"service": service, "action": action})

    if service == "server" and action != "start":
        from modules.backend.core.config import get_app_config

        server_port = port or get_app_config().application.server.port
        if action == "status":
            _server_status(server_port)
            return
        _server_stop(logger, server_port)
        if action == "stop":
            return
        time.sleep(2)

    if service == "server":
        run_server(logger, host, port, reload)
    elif service == "init-db":
        asyncio.run(init_db(logger))
    elif service == "create-user":
        if not username or not password:
            click.echo(click.style("Error: --username and --password are required.", fg="red"), err=True)
            sys.exit(1)
        asyncio.run(create_user(logger, username, password))
    elif service == "health":
        check_health()
    elif service == "config":
        show_config()
    elif service == "test":
        run_tests(test_type)


def run_server(logger, host: str | None, port: int | None, reload: bool) -> None:
    """Start the API server under uvicorn."""
    from modules.backend.core.config import get_app_config

    server_config = get_app_config().application.server
    server_host = host or server_config.host
    server_port = port or server_config.port

    logger.info("Starting server", extra={"host": server_host, "port": server_port, "reload": reload})

    cmd = [
        sys.executable, "-m", "uvicorn",
        "modules.backend.main:app",
        "--host", server_host,
        "--port", str(server_port),
    ]
    if reload:
        cmd.append("--reload")

    click.echo(f"Starting server at http://{server_host}:{server_port}")
    click.echo("Press Ctrl+C to stop\n")

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except subprocess.CalledProcessError as e:
        logger.error("Server failed to start", extra={"exit_code": e.returncode})
        sys.exit(e.returncode)


async def init_db(logger) -> None:
    """Create all tables."""
    from modules.backend.core.database import create_tables, dispose_engine

    await create_tables()
    await dispose_engine()
    logger.info("Database tables created")
    click.echo("Database tables created.")


async def create_user(logger, username: str, password: str) -> None:
    """Create an API user. The REST API never creates users itself."""
    from sqlalchemy.exc import IntegrityError

    from modules.backend.core.database import create_tables, dispose_engine, get_session_factory
    from modules.backend.core.security import hash_password
    from modules.backend.models.user import User

    await create_tables()
    try:
        async with get_session_factory()() as session:
            session.add(User(username=username, password=hash_password(password), active=True))
            await session.commit()
    except IntegrityError:
        click.echo(click.style(f"Error: user {username} already exists.", fg="red"), err=True)
        sys.exit(1)
    finally:
        await dispose_engine()

    logger.info("User created", extra={"username": username})
    click.echo(f"User {username} created.")


def check_health() -> None:
    """Check that configuration loads and the application builds."""
    click.echo("Checking application health...\n")
    checks: list[tuple[str, bool, str | None]] = []

    try:
        from modules.backend.core.config import get_app_config

        app_config = get_app_config()
        checks.append(("YAML configuration", True, app_config.application.name))
    except Exception as e:
        checks.append(("YAML configuration", False, str(e)))

    try:
        from modules.backend.core.config import get_settings

        get_settings()
        checks.append(("Secrets (.env)", True, None))
    except Exception as e:
        checks.append(("Secrets (.env)", False, str(e)))

    try:
        from modules.backend.main import create_app

        fastapi_app = create_app()
        checks.append(("FastAPI application", True, f"{len(fastapi_app.routes)} routes"))
    except Exception as e:
        checks.append(("FastAPI application", False, str(e)))

    click.echo("Health Check Results:")
    click.echo("-" * 50)
    for name, passed, detail in checks:
        status = click.style("✓ PASS", fg="green") if passed else click.style("✗ FAIL", fg="red")
        detail_str = f" ({detail})" if detail else ""
        click.echo(f"  {status}  {name}{detail_str}")
    click.echo("-" * 50)

    if not all(passed for _, passed, _ in checks):
        click.echo(click.style("\nSome checks failed. See details above.", fg="yellow"))
        sys.exit(1)
    click.echo(click.style("\nAll checks passed!", fg="green"))


def show_config() -> None:
    """Print the loaded YAML configuration."""
    from modules.backend.core.config import get_app_config

    app_config = get_app_config()
    for title, section in (
        ("Application", app_config.application),
        ("Database", app_config.database),
        ("Logging", app_config.logging),
    ):
        click.echo(f"\n{title} Settings (from YAML):")
        click.echo("-" * 40)
        for key, value in section.model_dump().items():
            click.echo(f"  {key}: {value}")


def run_tests(test_type: str) -> None:
    cmd = [sys.executable, "-m", "pytest"]
    if test_type != "all":
        cmd.append(f"tests/{test_type}")
    click.echo(f"Running: {' '.join(cmd)}\n")
    sys.exit(subprocess.run(cmd).returncode)


if __name__ == "__main__":
    main()
