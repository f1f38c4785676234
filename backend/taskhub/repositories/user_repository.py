"""
TaskHub Backend: User Repository
===================================

What:  Create/read/update access to the `users` table.
How:   Wraps the request's AsyncSession. Writes are flushed immediately so
       unique-index violations surface here and are reported as
       ConflictError, which covers registrations that race past the
       service's pre-checks.
"""

import logging
import uuid
from typing import Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.exceptions import ConflictError
from taskhub.models.user import Role, User

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        return await self.db.get(User, user_id)

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def list_all(self) -> List[User]:
        result = await self.db.execute(select(User))
        return list(result.scalars().all())

    async def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        role: Role = Role.MEMBER,
    ) -> User:
        user = User(username=username, email=email, password=password_hash, role=int(role))
        self.db.add(user)
        try:
            await self.db.flush()
        except IntegrityError as e:
            logger.warning("Unique constraint rejected user %r: %s", username, e.orig)
            raise ConflictError(
                message="El nombre de usuario o el correo electrónico ya está en uso",
                context={"username": username},
            )
        return user

    async def set_role(self, user_id: uuid.UUID, role: Role) -> Optional[User]:
        """Update the role; returns None when the user does not exist."""
        user = await self.get_by_id(user_id)
        if user is None:
            return None
        user.role = int(role)
        await self.db.flush()
        return user

    async def usernames_by_ids(self, user_ids: Iterable[uuid.UUID]) -> Dict[uuid.UUID, str]:
        """Map of id → username for the ids that exist (one query)."""
        ids = {user_id for user_id in user_ids if user_id is not None}
        if not ids:
            return {}
        result = await self.db.execute(
            select(User.id, User.username).where(User.id.in_(ids))
        )
        return {row.id: row.username for row in result}
