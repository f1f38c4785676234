# Routes package init
"""
TaskHub Backend: API Routes Package
======================================

Route Inventory:
    - auth.py:    POST /register, POST /auth/login, POST /auth/logout
    - users.py:   GET /users, PUT /users/{id}/role,
                  GET /users/{id}/tasks, GET /users/{id}/groups
    - groups.py:  POST /groups, GET /groups, GET /groups/{id},
                  GET /groups/{id}/tasks
    - tasks.py:   POST /tasks, PUT /tasks/{id}, DELETE /tasks/{id},
                  GET /admin/tasks
    - health.py:  GET /health, GET /prueba, GET /favicon.ico

Routes are thin: they parse the request, call one service method and
return its envelope. Errors are raised as exceptions and formatted by the
global handlers in main.py.
"""
