# Services package init
"""
TaskHub Backend: Services Layer
==================================

What:  Handler logic between routes (HTTP) and repositories (persistence).

Service Inventory:
    - UserService:  register, login, list users, update role
    - GroupService: create, list, get, list for user
    - TaskService:  create, update, delete, list (all / group / user)
    - visibility:   the Admin/Member authorization filter
    - populate:     record serialization and reference resolution
    - passwords:    bcrypt hashing in the threadpool
    - errors:       per-operation translation of unexpected failures
"""
