# 📄 File: growguide/shared/core/rate_limiting.py
# 🧭 Purpose (Layman Explanation):
# Keeps any one client from hammering the write endpoints
# 🧪 Purpose (Technical Summary):
# Shared slowapi Limiter keyed on client address; enabled/disabled from settings at app creation
# 🔗 Dependencies:
# slowapi
# 🔄 Connected Modules / Calls From:
# growguide.main (app.state.limiter, exception handler), cultivation API endpoints

from slowapi import Limiter
from slowapi.util import get_remote_address

WRITE_LIMIT = "30/minute"

limiter = Limiter(key_func=get_remote_address)
