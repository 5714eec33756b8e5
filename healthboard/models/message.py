from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from healthboard.models.base import Base, UUIDMixin

if TYPE_CHECKING:
    from healthboard.models.session import Session


class SessionMessage(UUIDMixin, Base):
    """A single message within a session."""

    __tablename__ = "session_messages"

    session_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("sessions.id"),
        index=True,
    )
    seq: Mapped[int] = mapped_column(Integer)
    content: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        server_default=func.now(),
    )

    # Relationships
    session: Mapped[Session] = relationship(
        back_populates="messages",
    )
