from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from healthboard.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from healthboard.models.machine import Machine
    from healthboard.models.session import Session


class Account(UUIDMixin, TimestampMixin, Base):
    """A registered user account."""

    __tablename__ = "accounts"

    public_key: Mapped[str] = mapped_column(String, unique=True, index=True)
    username: Mapped[str | None] = mapped_column(String, default=None)

    # Relationships
    sessions: Mapped[list[Session]] = relationship(
        back_populates="account",
    )
    machines: Mapped[list[Machine]] = relationship(
        back_populates="account",
    )
