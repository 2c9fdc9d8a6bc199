# 📄 File: growguide/shared/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shared plumbing for talking to the database
# 🧪 Purpose (Technical Summary):
# Shared infrastructure package
# 🔗 Dependencies:
# database subpackage
# 🔄 Connected Modules / Calls From:
# Module infrastructure layers, growguide.main
