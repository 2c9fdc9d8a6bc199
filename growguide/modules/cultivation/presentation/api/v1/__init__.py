# 📄 File: growguide/modules/cultivation/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the cultivation web endpoints
# 🧪 Purpose (Technical Summary):
# Router exports for API v1
# 🔗 Dependencies:
# setup_days.py
# 🔄 Connected Modules / Calls From:
# growguide.api.v1.router

from .setup_days import setup_days_router

__all__ = ["setup_days_router"]
