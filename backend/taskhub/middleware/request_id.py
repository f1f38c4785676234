"""
TaskHub Backend: Request ID Middleware
=========================================

What:  Tags each request with a correlation ID, returned in `X-Request-ID`.
How:   A client-supplied X-Request-ID is reused only when it is a short token
       of safe characters; anything else (newlines, spaces, oversized values)
       is replaced by a generated ID so it cannot forge log lines. The value
       lives in a ContextVar so loggers and exception handlers (including the
       fallback 500 handler outside this middleware) can read it.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_ACCEPTED_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def accepted_request_id(value: Optional[str]) -> Optional[str]:
    """The client's ID if it is safe to log verbatim, else None."""
    if value and _ACCEPTED_ID.fullmatch(value):
        return value
    return None


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = accepted_request_id(request.headers.get(REQUEST_ID_HEADER)) or new_request_id()
        request.state.request_id = rid

        request_id_var.set(rid)
        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
