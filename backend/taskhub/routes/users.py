"""
TaskHub Backend: User Routes
===============================

What:  GET /users, PUT /users/{userId}/role, and the user-scoped listings
       GET /users/{userId}/tasks and GET /users/{userId}/groups.

The user id in the path is trusted as-is: no credential ties the caller to
it, so any caller can read any user's view.
"""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.database import get_db_session
from taskhub.schemas.common import ErrorResponse
from taskhub.schemas.group import GroupListResponse
from taskhub.schemas.task import TaskListResponse
from taskhub.schemas.user import RoleUpdateRequest, UserListResponse, UserResponse
from taskhub.services.group_service import group_service
from taskhub.services.task_service import task_service
from taskhub.services.user_service import user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=UserListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List users",
    description="All users, without password hashes.",
)
async def list_users(db: AsyncSession = Depends(get_db_session)) -> UserListResponse:
    return await user_service.list_users(db=db)


@router.put(
    "/{user_id}/role",
    response_model=UserResponse,
    responses={
        400: {"description": "Role is not 1 or 2", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Change a user's role",
    description="Sets role 1 (Admin) or 2 (Member).",
)
async def update_role(
    user_id: uuid.UUID,
    payload: Optional[RoleUpdateRequest] = None,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    # no body behaves like a body without `role`
    role = payload.role if payload is not None else None
    return await user_service.update_role(db=db, user_id=user_id, role=role)


@router.get(
    "/{user_id}/tasks",
    response_model=TaskListResponse,
    responses={
        404: {"description": "User not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Tasks visible to a user",
    description="Admins see every task; members see tasks of their groups.",
)
async def list_user_tasks(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> TaskListResponse:
    return await task_service.list_tasks_for_user(db=db, user_id=user_id)


@router.get(
    "/{user_id}/groups",
    response_model=GroupListResponse,
    responses={
        404: {"description": "User not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Groups visible to a user",
    description="Admins see every group; members see the groups they belong to.",
)
async def list_user_groups(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> GroupListResponse:
    return await group_service.list_groups_for_user(db=db, user_id=user_id)
