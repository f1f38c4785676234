"""
TaskHub Backend: User Request/Response Schemas
=================================================

Registration ignores any `role` sent by the caller (extra fields are
dropped), so a role can only change through the role-update endpoint.
"""

from typing import Any, List

from pydantic import Field

from taskhub.schemas.common import APIModel, DocumentModel, MessageResponse, SuccessResponse


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class RegisterRequest(APIModel):
    username: str
    email: str
    password: str


class LoginRequest(APIModel):
    username: str
    password: str


class RoleUpdateRequest(APIModel):
    """
    `role` is untyped so that no coercion happens ("1" stays a string).
    The service accepts only the integers 1 and 2 and answers anything else
    with the role message before touching storage.
    """

    role: Any = None


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class UserPublic(DocumentModel):
    """A user without the password hash."""

    username: str
    email: str
    role: int = Field(description="1 = Admin, 2 = Member")


class UserRecord(UserPublic):
    """The full stored user, hash included (login response only)."""

    password: str = Field(description="bcrypt hash of the password")


class LoginResponse(MessageResponse):
    user: UserRecord


class UserResponse(MessageResponse):
    user: UserPublic


class UserListResponse(SuccessResponse):
    users: List[UserPublic]
