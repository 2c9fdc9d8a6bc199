# 📄 File: growguide/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the service: what was asked for, how long it took
# to answer and whether it went wrong, with an id that ties all related log lines together.
# 🧪 Purpose (Technical Summary):
# Request logging middleware that assigns/propagates X-Request-ID, binds it to the logging
# context for the duration of the request, and logs method, path, status and duration.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware, growguide.shared.utils.logging (log_context)
# 🔄 Connected Modules / Calls From:
# growguide.main (middleware registration), error handlers (request.state.request_id)

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from growguide.shared.utils.logging import log_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware.

    Slow requests are logged at WARNING; failures propagate to the
    exception handlers after being logged here.
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold
        self.excluded_paths = {"/api/v1/health", "/favicon.ico"}

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        with log_context(request_id=request_id):
            start_time = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception:
                duration = time.perf_counter() - start_time
                logger.exception(
                    f"{request.method} {request.url.path} failed after {duration:.3f}s"
                )
                raise

            duration = time.perf_counter() - start_time
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Response-Time"] = f"{duration:.3f}s"

            if request.url.path not in self.excluded_paths:
                self._log_response(request, response, duration)

            return response

    def _log_response(self, request: Request, response: Response, duration: float) -> None:
        extra = {
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(duration * 1000, 2),
            "client_ip": request.client.host if request.client else None,
        }
        message = f"{request.method} {request.url.path} -> {response.status_code} ({duration:.3f}s)"

        if response.status_code >= 500:
            logger.error(message, extra=extra)
        elif duration > self.slow_request_threshold:
            logger.warning(f"Slow request: {message}", extra=extra)
        else:
            logger.info(message, extra=extra)
