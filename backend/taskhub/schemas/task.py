"""
TaskHub Backend: Task Request/Response Schemas
=================================================

Two shapes per task:
    TaskRecord  raw stored ids (create/update responses)
    TaskView    group → {_id, name}; assignedTo/createdBy → {_id, username}

Updates are partial: only the fields present in the body are applied
(`model_fields_set`). A `lastUpdated` sent by the caller is ignored; the
service stamps its own.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import model_validator

from taskhub.schemas.common import (
    APIModel,
    DocumentModel,
    GroupRef,
    MessageResponse,
    SuccessResponse,
    UserRef,
)

# Columns that cannot be cleared by an update
REQUIRED_TASK_FIELDS = ("name", "description", "due_date", "category", "status", "created_by")


class TaskCreateRequest(APIModel):
    name: str
    description: str
    due_date: datetime
    category: str
    status: str
    group: Optional[uuid.UUID] = None
    assigned_to: Optional[uuid.UUID] = None
    created_by: uuid.UUID


class TaskUpdateRequest(APIModel):
    name: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    category: Optional[str] = None
    status: Optional[str] = None
    group: Optional[uuid.UUID] = None
    assigned_to: Optional[uuid.UUID] = None
    created_by: Optional[uuid.UUID] = None

    @model_validator(mode="after")
    def reject_cleared_required_fields(self) -> "TaskUpdateRequest":
        cleared = [
            name for name in REQUIRED_TASK_FIELDS
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if cleared:
            raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
        return self


class TaskRecord(DocumentModel):
    name: str
    description: str
    due_date: datetime
    category: str
    status: str
    group: Optional[uuid.UUID] = None
    assigned_to: Optional[uuid.UUID] = None
    created_by: uuid.UUID
    last_updated: datetime


class TaskView(DocumentModel):
    name: str
    description: str
    due_date: datetime
    category: str
    status: str
    group: Optional[GroupRef] = None
    assigned_to: Optional[UserRef] = None
    created_by: Optional[UserRef] = None
    last_updated: datetime


class TaskResponse(MessageResponse):
    # null when an update targets an id that does not exist
    task: Optional[TaskRecord] = None


class TaskListResponse(SuccessResponse):
    tasks: List[TaskView]
