"""
Tag Model.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from modules.backend.models.base import Base, IntegerIdMixin


class Tag(IntegerIdMixin, Base):
    """A named, coloured label owned by a user."""

    __tablename__ = "tag"

    user_id: Mapped[int] = mapped_column(ForeignKey("user.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name!r})>"
