# 📄 File: growguide/shared/__init__.py
# 🧭 Purpose (Layman Explanation):
# Code shared across all GrowGuide modules
# 🧪 Purpose (Technical Summary):
# Shared kernel: config, core, utils, infrastructure
# 🔗 Dependencies:
# Subpackages
# 🔄 Connected Modules / Calls From:
# All modules
