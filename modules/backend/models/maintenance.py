"""
Maintenance Model.

A scheduled window during which monitor alerts are suppressed.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from modules.backend.core.utils import utc_now
from modules.backend.models.base import Base, IntegerIdMixin


class Maintenance(IntegerIdMixin, Base):
    """Maintenance window. ``created_date`` is always assigned by the server."""

    __tablename__ = "maintenance"

    user_id: Mapped[int] = mapped_column(ForeignKey("user.id"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(150), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    active: Mapped[bool] = mapped_column(default=True, nullable=False)
    created_date: Mapped[datetime] = mapped_column(DateTime, default=utc_now, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Maintenance(id={self.id}, title={self.title!r})>"
