"""
TaskHub Backend: Group Routes
================================

What:  POST /groups, GET /groups, GET /groups/{groupId},
       GET /groups/{groupId}/tasks.
"""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.database import get_db_session
from taskhub.schemas.common import ErrorResponse
from taskhub.schemas.group import (
    GroupCreateRequest,
    GroupDetailResponse,
    GroupListResponse,
    GroupResponse,
)
from taskhub.schemas.task import TaskListResponse
from taskhub.services.group_service import group_service
from taskhub.services.task_service import task_service

router = APIRouter(prefix="/groups", tags=["Groups"])


@router.post(
    "",
    response_model=GroupResponse,
    responses={
        400: {"description": "Group name already in use", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a group",
    description="Creator and member ids are stored as supplied.",
)
async def create_group(
    payload: GroupCreateRequest,
    db: AsyncSession = Depends(get_db_session),
) -> GroupResponse:
    return await group_service.create_group(db=db, payload=payload)


@router.get(
    "",
    response_model=GroupListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List groups",
    description="Every group, with creator and members resolved to usernames.",
)
async def list_groups(db: AsyncSession = Depends(get_db_session)) -> GroupListResponse:
    return await group_service.list_groups(db=db)


@router.get(
    "/{group_id}",
    response_model=GroupDetailResponse,
    responses={
        404: {"description": "Group not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a group",
)
async def get_group(
    group_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> GroupDetailResponse:
    return await group_service.get_group(db=db, group_id=group_id)


@router.get(
    "/{group_id}/tasks",
    response_model=TaskListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Tasks of a group",
    description="An unknown group id yields an empty list.",
)
async def list_group_tasks(
    group_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> TaskListResponse:
    return await task_service.list_group_tasks(db=db, group_id=group_id)
