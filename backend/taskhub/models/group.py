"""
TaskHub Backend: Group SQLAlchemy Models
===========================================

What:  ORM models for the `groups` table and its `group_members` association.

Reference handling:
    `created_by_id` and `group_members.user_id` hold user ids exactly as the
    caller supplied them. They carry no foreign key to `users`: the API trusts
    caller-supplied ids, and unresolvable ids simply populate to nothing.
    Membership rows do cascade with their group.
"""

import uuid
from typing import List

from sqlalchemy import ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskhub.database import Base


class Group(Base):
    """A named set of users. Membership is fixed at creation."""

    __tablename__ = "groups"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
    )

    created_by_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        nullable=False,
        comment="User id of the creator (not referentially checked)",
    )

    # selectin: memberships load with the group, no lazy IO under asyncio
    memberships: Mapped[List["GroupMember"]] = relationship(
        back_populates="group",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def member_ids(self) -> List[uuid.UUID]:
        return [membership.user_id for membership in self.memberships]

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name='{self.name}')>"


class GroupMember(Base):
    """One (group, user) membership row."""

    __tablename__ = "group_members"

    group_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("groups.id", ondelete="CASCADE"),
        primary_key=True,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
    )

    group: Mapped[Group] = relationship(back_populates="memberships")

    # "groups of user X" is the Member-branch visibility lookup
    __table_args__ = (
        Index("idx_group_members_user_id", "user_id"),
    )
