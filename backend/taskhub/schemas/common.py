"""
TaskHub Backend: Shared Pydantic Schemas
===========================================

What:  Base model and envelope types shared by every resource.
How:   Field names are snake_case in Python and camelCase on the wire
       (`created_by` ↔ `createdBy`); ids are exposed as `_id`. Requests
       accept either spelling.

Envelope:
    Success: {"success": true, "message"?: str, <entity or list>}
    Failure: {"success": false, "message": str}
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base for all request/response models (camelCase aliases)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DocumentModel(APIModel):
    """A stored record exposed with its `_id`."""

    id: uuid.UUID = Field(alias="_id", description="Opaque record identifier")


class UserRef(DocumentModel):
    """Populated user reference: only the display field."""

    username: str


class GroupRef(DocumentModel):
    """Populated group reference: only the display field."""

    name: str


class SuccessResponse(APIModel):
    success: bool = Field(default=True)


class MessageResponse(SuccessResponse):
    message: str = Field(description="Human-readable outcome (Spanish)")


class ErrorResponse(APIModel):
    """
    What:  Error envelope returned by every global exception handler.

    Example:
        {"success": false, "message": "El nombre de usuario ya está en uso"}
    """

    success: bool = Field(default=False)
    message: str = Field(description="Human-readable error description (Spanish)")


class HealthResponse(APIModel):
    """Health check response showing service and database status."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
