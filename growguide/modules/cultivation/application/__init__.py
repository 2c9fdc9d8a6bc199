# 📄 File: growguide/modules/cultivation/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The use cases of the cultivation module: what a grower can do with setup days
# 🧪 Purpose (Technical Summary):
# Application layer package (CQRS commands, queries, DTOs, handlers)
# 🔗 Dependencies:
# commands, queries, dto, handlers
# 🔄 Connected Modules / Calls From:
# Presentation layer
