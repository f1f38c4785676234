"""
TaskHub Backend: Task Routes
===============================

What:  POST /tasks, PUT /tasks/{taskId}, DELETE /tasks/{taskId},
       GET /admin/tasks.

GET /admin/tasks does not check the caller's role. There is no verified
caller identity to check against, so the endpoint is as open as the rest.
"""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.database import get_db_session
from taskhub.schemas.common import ErrorResponse, MessageResponse
from taskhub.schemas.task import (
    TaskCreateRequest,
    TaskListResponse,
    TaskResponse,
    TaskUpdateRequest,
)
from taskhub.services.task_service import task_service

router = APIRouter(tags=["Tasks"])


@router.post(
    "/tasks",
    response_model=TaskResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Create a task",
)
async def create_task(
    payload: TaskCreateRequest,
    db: AsyncSession = Depends(get_db_session),
) -> TaskResponse:
    return await task_service.create_task(db=db, payload=payload)


@router.put(
    "/tasks/{task_id}",
    response_model=TaskResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Update a task",
    description=(
        "Applies only the fields present in the body and stamps lastUpdated. "
        "An unknown id answers success with task=null."
    ),
)
async def update_task(
    task_id: uuid.UUID,
    payload: TaskUpdateRequest,
    db: AsyncSession = Depends(get_db_session),
) -> TaskResponse:
    return await task_service.update_task(db=db, task_id=task_id, payload=payload)


@router.delete(
    "/tasks/{task_id}",
    response_model=MessageResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Delete a task",
    description="Succeeds whether or not the task existed.",
)
async def delete_task(
    task_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await task_service.delete_task(db=db, task_id=task_id)


@router.get(
    "/admin/tasks",
    response_model=TaskListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List every task",
    description="All tasks with references resolved. No role check is applied.",
)
async def list_all_tasks(db: AsyncSession = Depends(get_db_session)) -> TaskListResponse:
    return await task_service.list_all_tasks(db=db)
