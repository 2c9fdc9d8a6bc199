# 📄 File: growguide/__init__.py
# 🧭 Purpose (Layman Explanation):
# The GrowGuide service: cultivation tracking with whole-setup day logging
# 🧪 Purpose (Technical Summary):
# Root package of the modular monolith (shared kernel, API shell, cultivation module)
# 🔗 Dependencies:
# None at import time
# 🔄 Connected Modules / Calls From:
# growguide.main

__version__ = "1.0.0"
