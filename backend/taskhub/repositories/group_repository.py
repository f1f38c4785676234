"""
TaskHub Backend: Group Repository
====================================

What:  Create/read access to `groups` and their memberships.
How:   Member ids are stored as given (duplicates collapsed, order kept).
       The name's unique index backs the service's pre-check.
"""

import logging
import uuid
from typing import Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.exceptions import ConflictError
from taskhub.models.group import Group, GroupMember

logger = logging.getLogger(__name__)


class GroupRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, group_id: uuid.UUID) -> Optional[Group]:
        return await self.db.get(Group, group_id)

    async def get_by_name(self, name: str) -> Optional[Group]:
        result = await self.db.execute(select(Group).where(Group.name == name))
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Group]:
        result = await self.db.execute(select(Group))
        return list(result.scalars().all())

    async def list_by_ids(self, group_ids: Iterable[uuid.UUID]) -> List[Group]:
        ids = list(group_ids)
        if not ids:
            return []
        result = await self.db.execute(select(Group).where(Group.id.in_(ids)))
        return list(result.scalars().all())

    async def member_group_ids(self, user_id: uuid.UUID) -> List[uuid.UUID]:
        """Ids of the groups that list `user_id` as a member."""
        result = await self.db.execute(
            select(GroupMember.group_id).where(GroupMember.user_id == user_id)
        )
        return list(result.scalars().all())

    async def create(
        self,
        name: str,
        created_by: uuid.UUID,
        members: Iterable[uuid.UUID],
    ) -> Group:
        unique_members = list(dict.fromkeys(members))
        group = Group(
            name=name,
            created_by_id=created_by,
            memberships=[GroupMember(user_id=member_id) for member_id in unique_members],
        )
        self.db.add(group)
        try:
            await self.db.flush()
        except IntegrityError as e:
            logger.warning("Unique constraint rejected group %r: %s", name, e.orig)
            raise ConflictError(
                message="El nombre del grupo ya está en uso",
                field="name",
            )
        return group

    async def names_by_ids(self, group_ids: Iterable[uuid.UUID]) -> Dict[uuid.UUID, str]:
        """Map of id → name for the ids that exist (one query)."""
        ids = {group_id for group_id in group_ids if group_id is not None}
        if not ids:
            return {}
        result = await self.db.execute(
            select(Group.id, Group.name).where(Group.id.in_(ids))
        )
        return {row.id: row.name for row in result}
