# 📄 File: growguide/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing shell of the service: routers and request-wide middleware
# 🧪 Purpose (Technical Summary):
# API package (versioned routers, middleware)
# 🔗 Dependencies:
# v1, middleware
# 🔄 Connected Modules / Calls From:
# growguide.main
