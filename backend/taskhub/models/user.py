"""
TaskHub Backend: User SQLAlchemy Model
=========================================

What:  ORM model for the `users` table.
How:   Username and email carry unique indexes so the database rejects
       duplicates even when two registrations race past the pre-checks.

Lifecycle:
    1. Created on registration (role always Member)
    2. Updated only by the role-update endpoint
    3. Never deleted by any exposed operation
"""

import enum
import uuid

from sqlalchemy import Integer, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from taskhub.database import Base


class Role(enum.IntEnum):
    """Coarse authorization level controlling data visibility."""

    ADMIN = 1
    MEMBER = 2


class User(Base):
    """A registered account."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
        comment="Login name, unique and case-sensitive",
    )

    email: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
    )

    # bcrypt hash ($2b$...), never the plaintext
    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt password hash",
    )

    role: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=int(Role.MEMBER),
        server_default=text(str(int(Role.MEMBER))),
        comment="1 = Admin, 2 = Member",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}', role={self.role})>"
