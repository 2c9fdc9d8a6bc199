# 📄 File: growguide/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 requests, sending setup requests to the cultivation
# endpoints and checkups to the health endpoint
# 🧪 Purpose (Technical Summary):
# API v1 router aggregation with route prefixes and tags
# 🔗 Dependencies:
# FastAPI, growguide.api.v1.health, cultivation presentation routers
# 🔄 Connected Modules / Calls From:
# growguide.main

from fastapi import APIRouter

from growguide.modules.cultivation.presentation.api.v1.setup_days import setup_days_router

from .health import health_router

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["Health Check"])

api_v1_router.include_router(
    setup_days_router,
    prefix="/setups",
    tags=["Setup Days"],
)
