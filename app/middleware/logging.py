"""
Campus Records API - Request Logging Middleware
================================================

What:  One access log line per HTTP request.
How:   Measures wall time around the downstream app and logs method, path,
       status, duration, the caller role and token subject resolved by the
       role guard, request ID and client address. The same values are
       attached as `extra` fields for structured handlers.

Log level by status:
    5xx → ERROR
    4xx → WARNING (403s from the role guard show up here)
    else → INFO

Not logged: query strings and bodies (they carry e-mail addresses) and
the Authorization header.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("campus_records.access")


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    # Probed every few seconds by load balancers
    SKIP_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.SKIP_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        # Set by app.security.get_current_role; absent when no guard ran.
        role = getattr(request.state, "role", None)
        fields = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": path,
            "status": response.status_code,
            "duration_ms": round(elapsed_ms, 2),
            "role": role.value if role is not None else "-",
            "subject": getattr(request.state, "subject", None) or "-",
            "client_ip": request.client.host if request.client else "unknown",
        }

        logger.log(
            _level_for(response.status_code),
            "%(method)s %(path)s %(status)d %(duration_ms).1fms role=%(role)s "
            "sub=%(subject)s [%(request_id)s] from %(client_ip)s",
            fields,
            extra=fields,
        )
        return response
