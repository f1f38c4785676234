# Middleware package init
"""
TaskHub Backend: Middleware Package
======================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID for logging and the X-Request-ID header
    2. Logging: one access line per request, tagged with the request ID
    3. GZip / CORS: applied by Starlette's built-in middleware
"""
