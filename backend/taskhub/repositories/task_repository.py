"""
TaskHub Backend: Task Repository
===================================

What:  Create/read/update/delete access to the `tasks` table.
How:   `last_updated` is stamped here on every create and update, whatever
       the caller sent. Deletes are unconditional.
"""

import uuid
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.models.task import Task, utcnow


class TaskRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, task_id: uuid.UUID) -> Optional[Task]:
        return await self.db.get(Task, task_id)

    async def list_all(self) -> List[Task]:
        result = await self.db.execute(select(Task))
        return list(result.scalars().all())

    async def list_by_group(self, group_id: uuid.UUID) -> List[Task]:
        result = await self.db.execute(select(Task).where(Task.group_id == group_id))
        return list(result.scalars().all())

    async def list_by_groups(self, group_ids: Iterable[uuid.UUID]) -> List[Task]:
        ids = list(group_ids)
        if not ids:
            return []
        result = await self.db.execute(select(Task).where(Task.group_id.in_(ids)))
        return list(result.scalars().all())

    async def create(self, **fields: Any) -> Task:
        fields.pop("last_updated", None)
        task = Task(**fields, last_updated=utcnow())
        self.db.add(task)
        await self.db.flush()
        return task

    async def update(self, task_id: uuid.UUID, changes: Dict[str, Any]) -> Optional[Task]:
        """
        Apply `changes` to the task and stamp `last_updated`.

        Fields not in `changes` keep their stored values. Returns None when
        the id does not exist.
        """
        task = await self.get_by_id(task_id)
        if task is None:
            return None
        for column, value in changes.items():
            setattr(task, column, value)
        task.last_updated = utcnow()
        await self.db.flush()
        return task

    async def delete(self, task_id: uuid.UUID) -> int:
        """Delete the task if present; returns the number of rows removed."""
        result = await self.db.execute(delete(Task).where(Task.id == task_id))
        return result.rowcount or 0
