"""
TaskHub Backend: Task Service
================================

What:  Task create/update/delete and the task listings.

Behaviors worth knowing:
    - `lastUpdated` is always stamped server-side.
    - Updates are partial and do not validate referenced ids.
    - Updating an id that does not exist answers success with `task: null`.
    - Deleting is idempotent: a missing id still answers success.
    - GET /admin/tasks performs no role check.
"""

import logging
import uuid
from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.repositories import TaskRepository
from taskhub.schemas.common import MessageResponse
from taskhub.schemas.task import (
    TaskCreateRequest,
    TaskListResponse,
    TaskResponse,
    TaskUpdateRequest,
)
from taskhub.services.errors import storage_errors
from taskhub.services.populate import populate_tasks, task_record
from taskhub.services.visibility import resolve_visibility, visible_tasks

logger = logging.getLogger(__name__)

# Request field → Task column
_REFERENCE_COLUMNS = {
    "group": "group_id",
    "assigned_to": "assigned_to_id",
    "created_by": "created_by_id",
}


def to_columns(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {_REFERENCE_COLUMNS.get(name, name): value for name, value in fields.items()}


class TaskService:

    @storage_errors("Error al crear la tarea")
    async def create_task(self, db: AsyncSession, payload: TaskCreateRequest) -> TaskResponse:
        task = await TaskRepository(db).create(**to_columns(payload.model_dump()))
        logger.info("Task created: %s (%s)", task.name, task.id)
        return TaskResponse(message="Tarea creada exitosamente", task=task_record(task))

    @storage_errors("Error al actualizar la tarea")
    async def update_task(
        self,
        db: AsyncSession,
        task_id: uuid.UUID,
        payload: TaskUpdateRequest,
    ) -> TaskResponse:
        changes = to_columns(payload.model_dump(exclude_unset=True))
        task = await TaskRepository(db).update(task_id, changes)
        if task is None:
            logger.warning("Update for unknown task %s; answering with task=null", task_id)
            return TaskResponse(message="Tarea actualizada", task=None)
        logger.info("Task %s updated: %s", task.id, sorted(changes))
        return TaskResponse(message="Tarea actualizada", task=task_record(task))

    @storage_errors("Error al eliminar la tarea")
    async def delete_task(self, db: AsyncSession, task_id: uuid.UUID) -> MessageResponse:
        removed = await TaskRepository(db).delete(task_id)
        logger.info("Delete task %s: %d row(s) removed", task_id, removed)
        return MessageResponse(message="Tarea eliminada")

    @storage_errors("Error al obtener todas las tareas")
    async def list_all_tasks(self, db: AsyncSession) -> TaskListResponse:
        tasks = await TaskRepository(db).list_all()
        return TaskListResponse(tasks=await populate_tasks(db, tasks))

    @storage_errors("Error al obtener las tareas del grupo")
    async def list_group_tasks(self, db: AsyncSession, group_id: uuid.UUID) -> TaskListResponse:
        tasks = await TaskRepository(db).list_by_group(group_id)
        return TaskListResponse(tasks=await populate_tasks(db, tasks))

    @storage_errors("Error al obtener las tareas del usuario")
    async def list_tasks_for_user(self, db: AsyncSession, user_id: uuid.UUID) -> TaskListResponse:
        """
        Tasks visible to `user_id` (see services/visibility.py).

        Raises:
            NotFoundError: unknown user (→ 404)
        """
        visibility = await resolve_visibility(db, user_id)
        tasks = await visible_tasks(db, visibility)
        return TaskListResponse(tasks=await populate_tasks(db, tasks))


task_service = TaskService()
