"""
TaskHub Backend: Authorization Filter
========================================

What:  Decides which groups and tasks a user may list.
Who:   GET /users/{id}/tasks and GET /users/{id}/groups. Both go through
       `resolve_visibility()` so the two endpoints cannot drift apart.

Rule:
    role 1 (Admin)  → everything, including tasks without a group
    role 2 (Member) → groups listing the user as member,
                      and tasks whose group is one of those

The user id comes from the request path and is not tied to any verified
credential: any caller can ask for any user's view.
"""

import uuid
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.exceptions import NotFoundError
from taskhub.models.group import Group
from taskhub.models.task import Task
from taskhub.models.user import Role
from taskhub.repositories import GroupRepository, TaskRepository, UserRepository


@dataclass(frozen=True)
class Visibility:
    """What one user may see. `group_ids` is ignored when unrestricted."""

    user_id: uuid.UUID
    unrestricted: bool
    group_ids: FrozenSet[uuid.UUID] = field(default_factory=frozenset)


def build_visibility(
    role: int,
    user_id: uuid.UUID,
    member_group_ids: Optional[Iterable[uuid.UUID]] = None,
) -> Visibility:
    """Pure two-branch rule: admins are unrestricted, everyone else is group-scoped."""
    if role == Role.ADMIN:
        return Visibility(user_id=user_id, unrestricted=True)
    return Visibility(
        user_id=user_id,
        unrestricted=False,
        group_ids=frozenset(member_group_ids or ()),
    )


async def resolve_visibility(db: AsyncSession, user_id: uuid.UUID) -> Visibility:
    """
    Load the user and build their Visibility.

    Raises:
        NotFoundError: `user_id` does not belong to a user (→ 404)
    """
    user = await UserRepository(db).get_by_id(user_id)
    if user is None:
        raise NotFoundError(
            message="Usuario no encontrado",
            resource="user",
            resource_id=str(user_id),
        )
    if user.role == Role.ADMIN:
        return build_visibility(user.role, user.id)
    member_group_ids = await GroupRepository(db).member_group_ids(user.id)
    return build_visibility(user.role, user.id, member_group_ids)


async def visible_groups(db: AsyncSession, visibility: Visibility) -> List[Group]:
    groups = GroupRepository(db)
    if visibility.unrestricted:
        return await groups.list_all()
    return await groups.list_by_ids(visibility.group_ids)


async def visible_tasks(db: AsyncSession, visibility: Visibility) -> List[Task]:
    tasks = TaskRepository(db)
    if visibility.unrestricted:
        return await tasks.list_all()
    return await tasks.list_by_groups(visibility.group_ids)
