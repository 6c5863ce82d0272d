"""
Status Page Model.

Public aggregation of selected monitors under a globally unique slug.
"""

from sqlalchemy import Column, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from modules.backend.models.base import Base, IntegerIdMixin
from modules.backend.models.monitor import Monitor

monitor_status_page = Table(
    "monitor_status_page",
    Base.metadata,
    Column("status_page_id", ForeignKey("status_page.id", ondelete="CASCADE"), primary_key=True),
    Column("monitor_id", ForeignKey("monitor.id", ondelete="CASCADE"), primary_key=True),
)


class StatusPage(IntegerIdMixin, Base):
    """Status page database model."""

    __tablename__ = "status_page"

    user_id: Mapped[int] = mapped_column(ForeignKey("user.id"), nullable=False, index=True)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    published: Mapped[bool] = mapped_column(default=True, nullable=False)

    monitors: Mapped[list[Monitor]] = relationship(
        secondary=monitor_status_page,
        order_by=Monitor.name,
    )

    def __repr__(self) -> str:
        return f"<StatusPage(id={self.id}, slug={self.slug!r})>"
