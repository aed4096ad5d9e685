"""Access Logging Middleware - one info line per incoming request.

Invariants:
    - Logged before the route runs, so rejected and unknown routes are logged too
    - Message is "<METHOD> <path>[?<query>]"
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method and target of every request through the service logger."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        target = request.url.path
        if request.url.query:
            target += f"?{request.url.query}"
        request.app.state.service_logger.info(f"{request.method} {target}")
        return await call_next(request)
