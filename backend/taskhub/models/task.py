"""
TaskHub Backend: Task SQLAlchemy Model
=========================================

What:  ORM model for the `tasks` table.

Notes:
    - `status` and `category` are free-text labels; there is no state machine.
    - `group_id`, `assigned_to_id` and `created_by_id` are stored as supplied,
      without foreign keys (see models/group.py).
    - `last_updated` is stamped by the service on every create and update.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from taskhub.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    """A unit of work, optionally scoped to a group."""

    __tablename__ = "tasks"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    due_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False)

    group_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)
    assigned_to_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)
    created_by_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)

    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    __table_args__ = (
        Index("idx_tasks_group_id", "group_id"),
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, name='{self.name}', status='{self.status}')>"
