"""
Application Modules.

- backend/: REST API (/api/v2), database, configuration, monitor scheduling hooks
- cli/: uptime-kuma command-line client (Typer + Rich + httpx)
"""
