"""
TaskHub Backend: Record Serialization and Populate Step
==========================================================

What:  Turns ORM rows into response schemas.
How:   `*_record()` keep stored ids as-is. `populate_*()` replace them with
       shallow display projections ({_id, username} / {_id, name}) using one
       batched lookup per referenced table. Nothing is written back.

Unresolvable references (ids that never pointed at a stored row) become
null for single references and are left out of member lists.
"""

import uuid
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.models.group import Group
from taskhub.models.task import Task
from taskhub.models.user import User
from taskhub.repositories import GroupRepository, UserRepository
from taskhub.schemas.common import GroupRef, UserRef
from taskhub.schemas.group import GroupRecord, GroupView
from taskhub.schemas.task import TaskRecord, TaskView
from taskhub.schemas.user import UserPublic, UserRecord


def user_public(user: User) -> UserPublic:
    return UserPublic(id=user.id, username=user.username, email=user.email, role=user.role)


def user_record(user: User) -> UserRecord:
    return UserRecord(
        id=user.id,
        username=user.username,
        email=user.email,
        role=user.role,
        password=user.password,
    )


def group_record(group: Group) -> GroupRecord:
    return GroupRecord(
        id=group.id,
        name=group.name,
        created_by=group.created_by_id,
        members=group.member_ids,
    )


def task_record(task: Task) -> TaskRecord:
    return TaskRecord(
        id=task.id,
        name=task.name,
        description=task.description,
        due_date=task.due_date,
        category=task.category,
        status=task.status,
        group=task.group_id,
        assigned_to=task.assigned_to_id,
        created_by=task.created_by_id,
        last_updated=task.last_updated,
    )


def _user_ref(user_id: Optional[uuid.UUID], usernames: Dict[uuid.UUID, str]) -> Optional[UserRef]:
    if user_id is None or user_id not in usernames:
        return None
    return UserRef(id=user_id, username=usernames[user_id])


def _group_ref(group_id: Optional[uuid.UUID], names: Dict[uuid.UUID, str]) -> Optional[GroupRef]:
    if group_id is None or group_id not in names:
        return None
    return GroupRef(id=group_id, name=names[group_id])


async def populate_groups(db: AsyncSession, groups: List[Group]) -> List[GroupView]:
    """Resolve creator and members of each group to {_id, username}."""
    user_ids = set()
    for group in groups:
        user_ids.add(group.created_by_id)
        user_ids.update(group.member_ids)
    usernames = await UserRepository(db).usernames_by_ids(user_ids)

    views = []
    for group in groups:
        members = [_user_ref(member_id, usernames) for member_id in group.member_ids]
        views.append(
            GroupView(
                id=group.id,
                name=group.name,
                created_by=_user_ref(group.created_by_id, usernames),
                members=[member for member in members if member is not None],
            )
        )
    return views


async def populate_tasks(db: AsyncSession, tasks: List[Task]) -> List[TaskView]:
    """Resolve group → {_id, name}, assignedTo/createdBy → {_id, username}."""
    group_names = await GroupRepository(db).names_by_ids(task.group_id for task in tasks)
    usernames = await UserRepository(db).usernames_by_ids(
        [task.assigned_to_id for task in tasks] + [task.created_by_id for task in tasks]
    )
    return [
        TaskView(
            id=task.id,
            name=task.name,
            description=task.description,
            due_date=task.due_date,
            category=task.category,
            status=task.status,
            group=_group_ref(task.group_id, group_names),
            assigned_to=_user_ref(task.assigned_to_id, usernames),
            created_by=_user_ref(task.created_by_id, usernames),
            last_updated=task.last_updated,
        )
        for task in tasks
    ]
