# 📄 File: growguide/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the GrowGuide service, connects to the database,
# wires all the parts together and shuts everything down cleanly.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: lifespan-owned database managers stored on
# app.state (no module-level engine), middleware, exception handlers, rate limiting and
# router registration.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn, slowapi
# - growguide.shared.config.settings
# - growguide.shared.infrastructure.database (connection and session managers)
# - growguide.api (routers, middleware)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Test fixtures (create_application with test settings)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from growguide.api.middleware.error_handling import register_exception_handlers
from growguide.api.middleware.logging import RequestLoggingMiddleware
from growguide.api.v1.router import api_v1_router
from growguide.shared.config.settings import Settings, get_settings
from growguide.shared.core.rate_limiting import limiter
from growguide.shared.infrastructure.database.connection import DatabaseConnectionManager
from growguide.shared.infrastructure.database.session import DatabaseSessionManager
from growguide.shared.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with all necessary
    middleware, routers, and settings based on the current environment.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("🌱 GrowGuide API starting up...")

        connection_manager = DatabaseConnectionManager(settings)
        await connection_manager.initialize()
        session_manager = DatabaseSessionManager(connection_manager)
        session_manager.initialize()

        app.state.connection_manager = connection_manager
        app.state.session_manager = session_manager
        logger.info("✅ Database managers initialized")

        try:
            yield
        finally:
            logger.info("🔄 GrowGuide API shutting down...")
            await connection_manager.close()
            logger.info("✅ GrowGuide API shutdown complete")

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    app.state.settings = settings

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # =========================================================================
    # RATE LIMITING & EXCEPTION HANDLERS
    # =========================================================================

    limiter.enabled = settings.RATE_LIMIT_ENABLED
    app.state.limiter = limiter
    register_exception_handlers(app, settings)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """Run the application with uvicorn (development entry point)."""
    settings = get_settings()
    uvicorn.run(
        "growguide.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
