# 📄 File: growguide/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings and configuration files that tell GrowGuide
# how to connect to its database and adjust its behavior.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management
# and database configuration.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - database.py (database configuration)
#
# 🔄 Connected Modules / Calls From:
# - growguide.main (application startup)
# - Infrastructure components

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
