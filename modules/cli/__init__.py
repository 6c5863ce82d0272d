"""
CLI Client Module.

Command-line client built with Typer for the Uptime Kuma REST API.

Architecture:
- CLI is a thin presentation layer
- All business logic lives in the backend
- CLI calls backend via HTTP (httpx) with Basic auth
- Sends X-Frontend-ID: cli header for log routing

Usage:
    uptime-kuma --help
    uptime-kuma config -u http://localhost:3001 -U admin -p secret
    uptime-kuma list
"""
