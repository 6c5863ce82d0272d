"""
Maintenance Repository.
"""

from modules.backend.models.maintenance import Maintenance
from modules.backend.repositories.base import BaseRepository


class MaintenanceRepository(BaseRepository[Maintenance]):
    """Maintenance windows, most recently created first."""

    model = Maintenance
    default_order = (Maintenance.created_date.desc(), Maintenance.id.desc())
