# 📄 File: growguide/modules/cultivation/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The cultivation vocabulary and rules, independent of web or database
# 🧪 Purpose (Technical Summary):
# Domain layer: entities, repository interfaces, pure services
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# Application and infrastructure layers
