"""
TaskHub Backend: Registration and Session Routes
===================================================

What:  POST /register, POST /auth/login, POST /auth/logout.

There is no session or token: login returns the user record and the caller
keeps whatever state it needs. Logout is an acknowledgment only.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.database import get_db_session
from taskhub.schemas.common import ErrorResponse, MessageResponse
from taskhub.schemas.user import LoginRequest, LoginResponse, RegisterRequest
from taskhub.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post(
    "/register",
    response_model=MessageResponse,
    responses={
        400: {"description": "Username or email already in use", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Register a new user",
    description="Creates a Member (role 2) account. Any role in the body is ignored.",
)
async def register(
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await user_service.register(db=db, payload=payload)


@router.post(
    "/auth/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Wrong password", "model": ErrorResponse},
        404: {"description": "Unknown username", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Log in",
    description="Checks the password and returns the stored user record.",
)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    return await user_service.login(db=db, payload=payload)


@router.post(
    "/auth/logout",
    response_model=MessageResponse,
    summary="Log out",
    description="Stateless acknowledgment; nothing is stored server-side.",
)
async def logout() -> MessageResponse:
    return MessageResponse(message="Sesión cerrada exitosamente")
