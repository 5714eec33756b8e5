from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from healthboard.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from healthboard.models.account import Account
    from healthboard.models.message import SessionMessage


class Session(UUIDMixin, TimestampMixin, Base):
    """A client session owned by an account."""

    __tablename__ = "sessions"

    account_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("accounts.id"),
        index=True,
    )
    tag: Mapped[str] = mapped_column(String)
    active: Mapped[bool] = mapped_column(default=True)
    metadata_: Mapped[dict[str, Any] | None] = mapped_column(
        "metadata", JSON, nullable=True, default=None
    )

    # Relationships
    account: Mapped[Account] = relationship(
        back_populates="sessions",
    )
    messages: Mapped[list[SessionMessage]] = relationship(
        back_populates="session",
    )
