"""
TaskHub Backend: User Service Unit Tests
===========================================

What:  Registration, login and role rules at the service layer.
How:   Real repositories over the per-test SQLite database.

What we test:
    ✅ Username checked before email; both collisions → ConflictError
    ✅ Stored role is always Member; stored password is a bcrypt hash
    ✅ Unique index is the backstop when pre-checks are bypassed
    ✅ Login: unknown user vs wrong password are distinct failures
    ✅ parse_role accepts only the numbers 1 and 2
    ✅ Unexpected storage failures become DatabaseError with the action message
"""

import uuid
from unittest.mock import AsyncMock, patch

import pytest

from taskhub.exceptions import (
    ConflictError,
    DatabaseError,
    InvalidCredentialsError,
    InvalidInputError,
    NotFoundError,
)
from taskhub.models.user import Role
from taskhub.repositories import UserRepository
from taskhub.schemas.user import LoginRequest, RegisterRequest
from taskhub.services.passwords import hash_password, verify_password
from taskhub.services.user_service import UserService, parse_role


class TestRegister:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_register_stores_member_with_hashed_password(self, db_session):
        result = await self.service.register(
            db_session,
            RegisterRequest(username="ana", email="a@x.com", password="p1"),
        )

        assert result.success is True
        assert result.message == "Usuario registrado exitosamente"

        user = await UserRepository(db_session).get_by_username("ana")
        assert user.role == Role.MEMBER
        assert user.password != "p1"
        assert user.password.startswith("$2")
        assert await verify_password("p1", user.password)

    @pytest.mark.asyncio
    async def test_duplicate_username_reports_username(self, db_session):
        await self.service.register(db_session, RegisterRequest(username="ana", email="a@x.com", password="p1"))

        with pytest.raises(ConflictError) as exc_info:
            await self.service.register(
                db_session, RegisterRequest(username="ana", email="otro@x.com", password="p2"),
            )
        assert "nombre de usuario" in exc_info.value.message
        assert exc_info.value.field == "username"

    @pytest.mark.asyncio
    async def test_duplicate_email_reports_email(self, db_session):
        await self.service.register(db_session, RegisterRequest(username="ana", email="a@x.com", password="p1"))

        with pytest.raises(ConflictError) as exc_info:
            await self.service.register(
                db_session, RegisterRequest(username="beto", email="a@x.com", password="p2"),
            )
        assert "correo electrónico" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_username_match_is_case_sensitive(self, db_session):
        await self.service.register(db_session, RegisterRequest(username="ana", email="a@x.com", password="p1"))
        result = await self.service.register(
            db_session, RegisterRequest(username="Ana", email="b@x.com", password="p1"),
        )
        assert result.success is True

    @pytest.mark.asyncio
    async def test_unique_index_rejects_duplicates_past_the_pre_check(self, db_session):
        users = UserRepository(db_session)
        await users.create("ana", "a@x.com", "hash")

        with pytest.raises(ConflictError):
            await users.create("ana", "b@x.com", "hash")

    @pytest.mark.asyncio
    async def test_storage_failure_becomes_database_error(self, db_session):
        with patch.object(
            UserRepository, "get_by_username", AsyncMock(side_effect=RuntimeError("connection lost")),
        ):
            with pytest.raises(DatabaseError) as exc_info:
                await self.service.register(
                    db_session, RegisterRequest(username="ana", email="a@x.com", password="p1"),
                )
        assert exc_info.value.message == "Error al registrar usuario"
        assert exc_info.value.context["error_type"] == "RuntimeError"


class TestLogin:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_login_returns_full_record(self, db_session):
        await self.service.register(db_session, RegisterRequest(username="ana", email="a@x.com", password="p1"))

        result = await self.service.login(db_session, LoginRequest(username="ana", password="p1"))

        assert result.message == "Inicio de sesión exitoso"
        assert result.user.username == "ana"
        assert result.user.role == 2
        assert result.user.password.startswith("$2")

    @pytest.mark.asyncio
    async def test_wrong_password_is_credential_error_not_not_found(self, db_session):
        await self.service.register(db_session, RegisterRequest(username="ana", email="a@x.com", password="p1"))

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await self.service.login(db_session, LoginRequest(username="ana", password="mal"))
        assert exc_info.value.message == "Contraseña incorrecta"

    @pytest.mark.asyncio
    async def test_unknown_username_is_not_found(self, db_session):
        with pytest.raises(NotFoundError) as exc_info:
            await self.service.login(db_session, LoginRequest(username="nadie", password="p1"))
        assert exc_info.value.message == "Usuario no encontrado"


class TestRoleUpdate:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.parametrize("value", [1, 2, 1.0])
    def test_parse_role_accepts_one_and_two(self, value):
        assert parse_role(value) in (Role.ADMIN, Role.MEMBER)

    @pytest.mark.parametrize("value", [0, 3, -1, 1.5, "1", "2", True, None, [1], {"role": 1}])
    def test_parse_role_rejects_everything_else(self, value):
        with pytest.raises(InvalidInputError):
            parse_role(value)

    @pytest.mark.asyncio
    async def test_invalid_role_never_reaches_storage(self, db_session):
        with patch.object(UserRepository, "set_role", AsyncMock()) as set_role:
            with pytest.raises(InvalidInputError):
                await self.service.update_role(db_session, uuid.uuid4(), 5)
        set_role.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_role_unknown_user(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.update_role(db_session, uuid.uuid4(), 1)

    @pytest.mark.asyncio
    async def test_update_role_returns_user_without_password(self, db_session):
        user = await UserRepository(db_session).create("ana", "a@x.com", "hash")

        result = await self.service.update_role(db_session, user.id, 1)

        assert result.user.role == 1
        assert "password" not in result.model_dump()


class TestPasswords:

    @pytest.mark.asyncio
    async def test_hashes_are_salted(self):
        first = await hash_password("igual")
        second = await hash_password("igual")
        assert first != second
        assert await verify_password("igual", first)
        assert await verify_password("igual", second)

    @pytest.mark.asyncio
    async def test_cost_factor_is_at_least_ten(self):
        hashed = await hash_password("clave")
        # $2b$<cost>$...
        assert int(hashed.split("$")[2]) >= 10

    @pytest.mark.asyncio
    async def test_non_bcrypt_value_does_not_verify(self):
        assert await verify_password("clave", "not-a-hash") is False
