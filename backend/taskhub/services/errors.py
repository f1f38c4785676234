"""
TaskHub Backend: Service Error Translation
=============================================

What:  Decorator that gives each service operation its own failure message.
How:   Application errors (TaskHubError subclasses) propagate unchanged.
       Anything else (driver errors, lost connections, bugs) is logged with
       its stack trace and re-raised as DatabaseError carrying the Spanish
       description of the attempted action. No retries.

Example:
    @storage_errors("Error al crear la tarea")
    async def create_task(self, db, payload): ...

    A dropped connection inside create_task reaches the client as
    500 {"success": false, "message": "Error al crear la tarea"}.
"""

import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

from taskhub.exceptions import DatabaseError, TaskHubError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def storage_errors(
    message: str,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return await func(*args, **kwargs)
            except TaskHubError:
                raise
            except Exception as e:
                logger.error("%s: %s", message, str(e), exc_info=True)
                raise DatabaseError(
                    message=message,
                    context={
                        "operation": func.__qualname__,
                        "error_type": type(e).__name__,
                    },
                ) from e

        return wrapper

    return decorator
