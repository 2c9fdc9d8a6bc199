# 📄 File: growguide/shared/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Database connection and session handling used by every module
# 🧪 Purpose (Technical Summary):
# Exports the explicit (non-singleton) engine and session managers
# 🔗 Dependencies:
# connection.py, session.py
# 🔄 Connected Modules / Calls From:
# growguide.main lifespan, shared dependencies, handlers, tests

from .connection import DatabaseConnectionManager
from .session import DatabaseSessionManager

__all__ = ["DatabaseConnectionManager", "DatabaseSessionManager"]
