# 📄 File: growguide/modules/cultivation/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Data formats for the cultivation web endpoints
# 🧪 Purpose (Technical Summary):
# Request/response schema package
# 🔗 Dependencies:
# day_entry_schemas.py
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/setup_days.py
