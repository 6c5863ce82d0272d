"""
User Model.

Accounts are owned by the host application. This layer only reads them
to resolve HTTP Basic credentials.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from modules.backend.models.base import Base, IntegerIdMixin


class User(IntegerIdMixin, Base):
    """User account with a bcrypt password hash."""

    __tablename__ = "user"

    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    active: Mapped[bool] = mapped_column(default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username!r})>"
