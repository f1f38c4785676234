# Models package init
"""
TaskHub Backend: ORM Models

Importing this package registers every table with `Base.metadata`
(used by `create_tables()` and Alembic autogenerate).
"""

from taskhub.models.group import Group, GroupMember
from taskhub.models.task import Task
from taskhub.models.user import Role, User

__all__ = ["Group", "GroupMember", "Role", "Task", "User"]
