"""Request ID tagging and access logging."""

import time
import uuid
import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from shortlink_app.api.errors import unhandled_exception_handler

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag every request with an id, reusing the client's one if sent.

    Outermost middleware: unhandled exceptions are turned into the 500
    envelope here so that response carries the id too.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as exc:
            response = await unhandled_exception_handler(request, exc)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status and duration."""

    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("shortlink.access")

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, start_time)
            raise

        self._log(request, response.status_code, start_time)
        return response

    def _log(self, request: Request, status_code: int, start_time: float) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info(
            "request completed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": status_code,
                "remote_addr": request.client.host if request.client else None,
                "duration_ms": round(duration_ms, 2),
                "request_id": getattr(request.state, "request_id", None),
            },
        )
