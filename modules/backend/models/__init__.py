# Importing every model registers its table on Base.metadata
from modules.backend.models.base import Base
from modules.backend.models.maintenance import Maintenance
from modules.backend.models.monitor import Heartbeat, HeartbeatStatus, Monitor
from modules.backend.models.status_page import StatusPage, monitor_status_page
from modules.backend.models.tag import Tag
from modules.backend.models.user import User

__all__ = [
    "Base",
    "Heartbeat",
    "HeartbeatStatus",
    "Maintenance",
    "Monitor",
    "StatusPage",
    "Tag",
    "User",
    "monitor_status_page",
]
