from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from healthboard.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from healthboard.models.account import Account


class Machine(UUIDMixin, TimestampMixin, Base):
    """A machine (daemon host) registered to an account."""

    __tablename__ = "machines"

    account_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("accounts.id"),
        index=True,
    )
    hostname: Mapped[str | None] = mapped_column(String, default=None)
    active: Mapped[bool] = mapped_column(default=True)
    last_active_at: Mapped[datetime | None] = mapped_column(default=None)

    # Relationships
    account: Mapped[Account] = relationship(
        back_populates="machines",
    )
