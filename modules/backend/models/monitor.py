"""
Monitor Model.

A configured check (HTTP, keyword, ping, TCP, ...) and the heartbeat
records collected for it by the scheduler.
"""

from datetime import datetime
from enum import IntEnum
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from modules.backend.core.utils import utc_now
from modules.backend.models.base import Base, IntegerIdMixin


class HeartbeatStatus(IntEnum):
    """Result of a single check."""

    DOWN = 0
    UP = 1
    PENDING = 2
    MAINTENANCE = 3


class Monitor(IntegerIdMixin, Base):
    """
    Monitor database model.

    ``active`` mirrors the scheduler: an active monitor always has a
    running check task, an inactive one never does.
    """

    __tablename__ = "monitor"

    user_id: Mapped[int] = mapped_column(ForeignKey("user.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    hostname: Mapped[str | None] = mapped_column(String(255), nullable=True)
    port: Mapped[int | None] = mapped_column(Integer, nullable=True)
    method: Mapped[str] = mapped_column(String(10), default="GET", nullable=False)
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    headers: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    keyword: Mapped[str | None] = mapped_column(String(255), nullable=True)
    interval: Mapped[int] = mapped_column(Integer, default=60, nullable=False)
    retry_interval: Mapped[int] = mapped_column(Integer, default=60, nullable=False)
    maxretries: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    timeout: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weight: Mapped[int] = mapped_column(Integer, default=2000, nullable=False)
    active: Mapped[bool] = mapped_column(default=True, nullable=False)
    auth_method: Mapped[str | None] = mapped_column(String(20), nullable=True)
    basic_auth_user: Mapped[str | None] = mapped_column(String(255), nullable=True)
    basic_auth_pass: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ignore_tls: Mapped[bool] = mapped_column(default=False, nullable=False)
    upside_down: Mapped[bool] = mapped_column(default=False, nullable=False)
    maxredirects: Mapped[int] = mapped_column(Integer, default=10, nullable=False)
    created_date: Mapped[datetime] = mapped_column(DateTime, default=utc_now, nullable=False)

    def __repr__(self) -> str:
        return f"<Monitor(id={self.id}, name={self.name!r}, active={self.active})>"


class Heartbeat(IntegerIdMixin, Base):
    """Append-only result of one check. Written by the scheduler, read here."""

    __tablename__ = "heartbeat"

    monitor_id: Mapped[int] = mapped_column(
        ForeignKey("monitor.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status: Mapped[int] = mapped_column(Integer, nullable=False)
    msg: Mapped[str | None] = mapped_column(Text, nullable=True)
    ping: Mapped[int | None] = mapped_column(Integer, nullable=True)
    time: Mapped[datetime] = mapped_column(DateTime, default=utc_now, nullable=False, index=True)
    important: Mapped[bool] = mapped_column(default=False, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<Heartbeat(id={self.id}, monitor_id={self.monitor_id}, status={self.status})>"
