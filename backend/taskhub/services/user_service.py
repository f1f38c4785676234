"""
TaskHub Backend: User Service
================================

What:  Registration, login, user listing and role changes.
Who:   Called by routes/auth.py and routes/users.py.

Known weaknesses kept for client compatibility:
    - Login answers "Usuario no encontrado" and "Contraseña incorrecta"
      differently, which tells callers whether a username exists.
    - The login response contains the stored password hash.
"""

import logging
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    InvalidInputError,
    NotFoundError,
)
from taskhub.models.user import Role
from taskhub.repositories import UserRepository
from taskhub.schemas.common import MessageResponse
from taskhub.schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserListResponse,
    UserResponse,
)
from taskhub.services.errors import storage_errors
from taskhub.services.passwords import hash_password, verify_password
from taskhub.services.populate import user_public, user_record

logger = logging.getLogger(__name__)

INVALID_ROLE_MESSAGE = "Rol inválido. Solo se permiten roles 1 (Admin) o 2 (Usuario)"


def parse_role(value: Any) -> Role:
    """
    Accept exactly the numbers 1 and 2.

    Raises:
        InvalidInputError: anything else, including "1", True and None
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value not in (1, 2):
        raise InvalidInputError(message=INVALID_ROLE_MESSAGE, field="role")
    return Role(int(value))


class UserService:
    """Business logic for user accounts. Stateless; one shared instance."""

    @storage_errors("Error al registrar usuario")
    async def register(self, db: AsyncSession, payload: RegisterRequest) -> MessageResponse:
        """
        Create a Member account.

        Order: username check, email check, hash, insert. The unique indexes
        still reject a duplicate that slips between check and insert.

        Raises:
            ConflictError: username or email already taken (→ 400)
        """
        users = UserRepository(db)

        if await users.get_by_username(payload.username) is not None:
            raise ConflictError(message="El nombre de usuario ya está en uso", field="username")

        if await users.get_by_email(payload.email) is not None:
            raise ConflictError(message="El correo electrónico ya está en uso", field="email")

        password_hash = await hash_password(payload.password)
        user = await users.create(
            username=payload.username,
            email=payload.email,
            password_hash=password_hash,
            role=Role.MEMBER,
        )
        logger.info("User registered: %s (%s)", user.username, user.id)

        return MessageResponse(message="Usuario registrado exitosamente")

    @storage_errors("Error al iniciar sesión")
    async def login(self, db: AsyncSession, payload: LoginRequest) -> LoginResponse:
        """
        Check a username/password pair and return the stored user.

        Raises:
            NotFoundError: unknown username (→ 404)
            InvalidCredentialsError: wrong password (→ 400)
        """
        user = await UserRepository(db).get_by_username(payload.username)
        if user is None:
            raise NotFoundError(message="Usuario no encontrado", resource="user")

        if not await verify_password(payload.password, user.password):
            logger.info("Failed login for %s", user.username)
            raise InvalidCredentialsError(message="Contraseña incorrecta")

        return LoginResponse(message="Inicio de sesión exitoso", user=user_record(user))

    @storage_errors("Error al obtener usuarios")
    async def list_users(self, db: AsyncSession) -> UserListResponse:
        users = await UserRepository(db).list_all()
        return UserListResponse(users=[user_public(user) for user in users])

    @storage_errors("Error al actualizar el rol del usuario")
    async def update_role(self, db: AsyncSession, user_id: uuid.UUID, role: Any) -> UserResponse:
        """
        Set a user's role.

        Raises:
            InvalidInputError: role is not 1 or 2; storage untouched (→ 400)
            NotFoundError: no such user (→ 404)
        """
        new_role = parse_role(role)

        user = await UserRepository(db).set_role(user_id, new_role)
        if user is None:
            raise NotFoundError(
                message="Usuario no encontrado",
                resource="user",
                resource_id=str(user_id),
            )
        logger.info("User %s role set to %d", user.id, new_role)

        return UserResponse(
            message="Rol de usuario actualizado exitosamente",
            user=user_public(user),
        )


user_service = UserService()
