# 📄 File: growguide/shared/core/__init__.py
# 🧭 Purpose (Layman Explanation):
# Core building blocks shared by every module: error types, request dependencies, rate limits
# 🧪 Purpose (Technical Summary):
# Shared core package
# 🔗 Dependencies:
# exceptions.py, dependencies.py, rate_limiting.py
# 🔄 Connected Modules / Calls From:
# All modules
