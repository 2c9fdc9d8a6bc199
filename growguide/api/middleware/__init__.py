# 📄 File: growguide/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Request-wide helpers that run around every endpoint (logging, error formatting)
# 🧪 Purpose (Technical Summary):
# Middleware and exception handler exports
# 🔗 Dependencies:
# logging.py, error_handling.py
# 🔄 Connected Modules / Calls From:
# growguide.main

from .error_handling import create_error_response, register_exception_handlers
from .logging import RequestLoggingMiddleware

__all__ = [
    "RequestLoggingMiddleware",
    "create_error_response",
    "register_exception_handlers",
]
