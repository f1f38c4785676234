"""
TaskHub Backend: Group Request/Response Schemas
==================================================

Two shapes per group:
    GroupRecord  raw stored ids (creation response)
    GroupView    creator/members populated to {_id, username} (listings)
"""

import uuid
from typing import List, Optional

from pydantic import Field

from taskhub.schemas.common import (
    APIModel,
    DocumentModel,
    MessageResponse,
    SuccessResponse,
    UserRef,
)


class GroupCreateRequest(APIModel):
    name: str
    created_by: uuid.UUID
    members: List[uuid.UUID] = Field(default_factory=list)


class GroupRecord(DocumentModel):
    name: str
    created_by: uuid.UUID
    members: List[uuid.UUID]


class GroupView(DocumentModel):
    name: str
    # null when the creator id does not resolve to a user
    created_by: Optional[UserRef] = None
    members: List[UserRef] = Field(default_factory=list)


class GroupResponse(MessageResponse):
    group: GroupRecord


class GroupDetailResponse(SuccessResponse):
    group: GroupView


class GroupListResponse(SuccessResponse):
    groups: List[GroupView]
