# 📄 File: growguide/shared/utils/__init__.py
# 🧭 Purpose (Layman Explanation):
# Small shared helpers (logging setup)
# 🧪 Purpose (Technical Summary):
# Shared utilities package
# 🔗 Dependencies:
# logging.py
# 🔄 Connected Modules / Calls From:
# growguide.main, middleware
