"""
TaskHub Backend: Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for each error outcome of the API.
How:   Each exception carries a user-facing (Spanish) message and an optional
       context dict. Global exception handlers (registered in main.py) turn
       them into `{"success": false, "message": ...}` envelopes.
Who:   Raised by services and repositories; caught by global handlers.

Exception Hierarchy:
    TaskHubError (base)
    ├── ConflictError            → 400 (duplicate username/email/group name)
    ├── InvalidInputError        → 400 (bad role value, malformed request)
    ├── InvalidCredentialsError  → 400 (password mismatch on login)
    ├── NotFoundError            → 404 (unknown user/group id)
    └── DatabaseError            → 500 (storage failure, message names the action)
"""

from typing import Any, Dict, Optional


class TaskHubError(Exception):
    """
    Base exception for all TaskHub application errors.

    Attributes:
        message:      User-facing error description (safe to return in API response)
        context:      Additional debug info (logged but NOT returned to client)
        status_code:  HTTP status used by the global handler
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "Error interno del servidor",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ConflictError(TaskHubError):
    """
    Raised when a unique value is already taken.

    When:  Registration with a used username or email, group creation with a
           used name, or a unique-index violation on insert.
    HTTP:  400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "El valor ya está en uso",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidInputError(TaskHubError):
    """
    Raised when client input is rejected before any storage access.

    HTTP:  400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Datos de entrada inválidos",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidCredentialsError(TaskHubError):
    """
    Raised when a login password does not match the stored hash.

    Kept distinct from NotFoundError: the login endpoint tells callers
    whether the username exists.
    HTTP:  400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Contraseña incorrecta",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(TaskHubError):
    """
    Raised when a referenced user or group does not exist.

    HTTP:  404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        message: str = "Recurso no encontrado",
        resource: Optional[str] = None,
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource:
            ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(TaskHubError):
    """
    Raised when a storage operation fails unexpectedly.

    The message names the attempted action ("Error al crear la tarea") and
    nothing else. Driver errors, SQL and stack traces are logged server-side
    only.
    HTTP:  500 Internal Server Error
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Error interno del servidor",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
