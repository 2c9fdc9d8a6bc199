# 📄 File: growguide/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A checkup endpoint that tells load balancers whether the service and its database are working
# 🧪 Purpose (Technical Summary):
# Health endpoint running the connection manager's retrying SELECT 1 probe; 503 when unhealthy
# 🔗 Dependencies:
# FastAPI, growguide.shared.core.dependencies (connection manager), settings
# 🔄 Connected Modules / Calls From:
# growguide.api.v1.router, monitoring systems

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from growguide.shared.config.settings import get_settings
from growguide.shared.core.dependencies import get_connection_manager
from growguide.shared.infrastructure.database.connection import DatabaseConnectionManager

logger = logging.getLogger(__name__)

health_router = APIRouter()


@health_router.get(
    "/health",
    summary="Health Check",
    description="Service and database health for load balancers and monitoring",
)
async def health_check(
    connection_manager: DatabaseConnectionManager = Depends(get_connection_manager),
) -> JSONResponse:
    database = await connection_manager.health_check()
    healthy = database["status"] == "healthy"
    if not healthy:
        logger.error(f"Health check failed: {database.get('error')}")

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "growguide-api",
            "version": get_settings().APP_VERSION,
            "checks": {"database": database},
        },
    )
