"""
TaskHub Backend: Group Service
=================================

What:  Group creation, listing and retrieval.

Creator and member ids are stored exactly as supplied; nothing checks that
they belong to existing users. Listings resolve them for display only.
"""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.exceptions import ConflictError, NotFoundError
from taskhub.repositories import GroupRepository
from taskhub.schemas.group import (
    GroupCreateRequest,
    GroupDetailResponse,
    GroupListResponse,
    GroupResponse,
)
from taskhub.services.errors import storage_errors
from taskhub.services.populate import group_record, populate_groups
from taskhub.services.visibility import resolve_visibility, visible_groups

logger = logging.getLogger(__name__)


class GroupService:

    @storage_errors("Error al crear el grupo")
    async def create_group(self, db: AsyncSession, payload: GroupCreateRequest) -> GroupResponse:
        """
        Raises:
            ConflictError: a group with this name exists (→ 400)
        """
        groups = GroupRepository(db)

        if await groups.get_by_name(payload.name) is not None:
            raise ConflictError(message="El nombre del grupo ya está en uso", field="name")

        group = await groups.create(
            name=payload.name,
            created_by=payload.created_by,
            members=payload.members,
        )
        logger.info("Group created: %s (%s) with %d members", group.name, group.id, len(group.memberships))

        return GroupResponse(message="Grupo creado exitosamente", group=group_record(group))

    @storage_errors("Error al obtener grupos")
    async def list_groups(self, db: AsyncSession) -> GroupListResponse:
        groups = await GroupRepository(db).list_all()
        return GroupListResponse(groups=await populate_groups(db, groups))

    @storage_errors("Error al obtener el grupo")
    async def get_group(self, db: AsyncSession, group_id: uuid.UUID) -> GroupDetailResponse:
        """
        Raises:
            NotFoundError: no group with this id (→ 404)
        """
        group = await GroupRepository(db).get_by_id(group_id)
        if group is None:
            raise NotFoundError(
                message="Grupo no encontrado",
                resource="group",
                resource_id=str(group_id),
            )
        views = await populate_groups(db, [group])
        return GroupDetailResponse(group=views[0])

    @storage_errors("Error al obtener los grupos del usuario")
    async def list_groups_for_user(self, db: AsyncSession, user_id: uuid.UUID) -> GroupListResponse:
        """
        Groups visible to `user_id`: all of them for admins, memberships otherwise.

        Raises:
            NotFoundError: unknown user (→ 404)
        """
        visibility = await resolve_visibility(db, user_id)
        groups = await visible_groups(db, visibility)
        return GroupListResponse(groups=await populate_groups(db, groups))


group_service = GroupService()
