"""
CLI Commands.

Monitor commands are registered at the top level; the remaining
resources each get a command group.
"""

from modules.cli.commands import monitors, system
from modules.cli.commands.maintenance import app as maintenance_app
from modules.cli.commands.status_pages import app as status_page_app
from modules.cli.commands.tags import app as tag_app

__all__ = [
    "monitors",
    "system",
    "maintenance_app",
    "status_page_app",
    "tag_app",
]
