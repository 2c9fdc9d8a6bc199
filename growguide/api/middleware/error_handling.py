# 📄 File: growguide/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Turns any error raised while handling a request into a clear, consistent error message,
# so the app always knows what went wrong and which request it belonged to.
# 🧪 Purpose (Technical Summary):
# FastAPI exception handlers rendering GrowGuideException, request validation errors,
# rate limit rejections and unexpected failures as one JSON error envelope with request
# correlation.
# 🔗 Dependencies:
# FastAPI, slowapi, growguide.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# growguide.main (handler registration)

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from growguide.shared.config.settings import Settings
from growguide.shared.core.exceptions import GrowGuideException, is_client_error

logger = logging.getLogger(__name__)


def create_error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Build the error envelope shared by every handler."""
    content = {
        "error": {
            "code": code,
            "message": message,
            "details": jsonable_encoder(details or {}),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": getattr(request.state, "request_id", None),
        }
    }
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Attach the service's exception handlers to ``app``."""

    @app.exception_handler(GrowGuideException)
    async def growguide_exception_handler(request: Request, exc: GrowGuideException) -> JSONResponse:
        if is_client_error(exc):
            logger.info(f"{request.method} {request.url.path} rejected: {exc.error_code} {exc.message}")
        else:
            logger.error(
                f"{request.method} {request.url.path} failed: {exc.error_code} {exc.message}",
                exc_info=exc,
            )
        return create_error_response(
            request, exc.status_code, exc.error_code, exc.message, exc.details
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
                "message": error.get("msg"),
                "type": error.get("type"),
            }
            for error in exc.errors()
        ]
        return create_error_response(
            request,
            422,
            "VALIDATION_ERROR",
            "Request validation failed",
            {"errors": errors},
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        logger.warning(f"Rate limit exceeded on {request.url.path}: {exc.detail}")
        return _rate_limit_exceeded_handler(request, exc)

    @app.exception_handler(Exception)
    async def internal_server_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Internal server error: {exc}", exc_info=exc)
        return create_error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_SERVER_ERROR",
            "An internal server error occurred",
            {"error_type": type(exc).__name__} if settings.DEBUG else {},
        )
