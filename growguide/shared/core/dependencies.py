"""
Common FastAPI dependencies for the GrowGuide service.
Provides caller identity and access to the per-application database managers.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Header, Request

from growguide.shared.infrastructure.database.connection import DatabaseConnectionManager
from growguide.shared.infrastructure.database.session import DatabaseSessionManager
from growguide.shared.utils.logging import bind_user

from .exceptions import AuthenticationError, DatabaseError

logger = logging.getLogger(__name__)

USER_ID_HEADER = "X-User-Id"


class CurrentUser:
    """Caller identity forwarded by the upstream auth layer."""

    def __init__(self, user_id: int):
        self.user_id = user_id

    def to_dict(self) -> Dict[str, Any]:
        return {"user_id": self.user_id}


async def get_current_user(
    x_user_id: Optional[str] = Header(default=None, alias=USER_ID_HEADER),
) -> CurrentUser:
    """
    Get the authenticated caller from the ``X-User-Id`` header.

    Raises:
        AuthenticationError: If the header is missing or not a positive integer
    """
    if not x_user_id:
        logger.warning("Request without caller identity header")
        raise AuthenticationError("User not authenticated")

    try:
        user_id = int(x_user_id)
    except ValueError:
        logger.warning(f"Malformed caller identity header: {x_user_id!r}")
        raise AuthenticationError("Invalid user identity") from None

    if user_id <= 0:
        raise AuthenticationError("Invalid user identity")

    bind_user(str(user_id))
    return CurrentUser(user_id=user_id)


def get_connection_manager(request: Request) -> DatabaseConnectionManager:
    manager = getattr(request.app.state, "connection_manager", None)
    if manager is None:
        raise DatabaseError("Database connection manager not available")
    return manager


def get_session_manager(request: Request) -> DatabaseSessionManager:
    """Session manager built in the application lifespan."""
    manager = getattr(request.app.state, "session_manager", None)
    if manager is None or not manager.is_initialized():
        raise DatabaseError("Database session manager not available")
    return manager
