# 📄 File: growguide/modules/cultivation/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about caring for setups and plants day by day
# 🧪 Purpose (Technical Summary):
# Cultivation module (domain, application, infrastructure, presentation layers)
# 🔗 Dependencies:
# Shared kernel
# 🔄 Connected Modules / Calls From:
# growguide.api.v1.router
