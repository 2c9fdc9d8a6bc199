# 📄 File: growguide/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# Feature modules of the service
# 🧪 Purpose (Technical Summary):
# Modular monolith module package
# 🔗 Dependencies:
# cultivation
# 🔄 Connected Modules / Calls From:
# growguide.api.v1.router
