"""
TaskHub Backend: Health and Utility Routes
=============================================

What:  GET /health (service + database probe), GET /prueba (smoke test),
       GET /favicon.ico (204 placeholder for browsers).

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from sqlalchemy import text

from taskhub import __version__
from taskhub import database
from taskhub.schemas.common import HealthResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check():
    """Runs SELECT 1 against the shared engine and reports the result."""
    db_status = "connected"
    overall = "healthy"

    try:
        async with database.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    body = HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if overall != "healthy":
        return JSONResponse(status_code=503, content=body.model_dump(by_alias=True))
    return body


@router.get("/prueba", response_model=MessageResponse, summary="Smoke test")
async def smoke_test() -> MessageResponse:
    logger.info("Prueba exitosa")
    return MessageResponse(message="Prueba exitosa")


@router.get("/favicon.ico", status_code=204, include_in_schema=False)
async def favicon() -> Response:
    return Response(status_code=204)
