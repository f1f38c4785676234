# Repositories package init
"""
TaskHub Backend: Entity Repositories

One repository per table. Each is constructed with the request's
AsyncSession, so every repository shares the process-wide engine and the
request's transaction.
"""

from taskhub.repositories.group_repository import GroupRepository
from taskhub.repositories.task_repository import TaskRepository
from taskhub.repositories.user_repository import UserRepository

__all__ = ["GroupRepository", "TaskRepository", "UserRepository"]
