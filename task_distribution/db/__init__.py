"""Database package - all database-related code."""
from task_distribution.db.connection import init_db, get_db_session, close_db
from task_distribution.db.models import Base, Employee, Task, TaskStatus

__all__ = [
    "init_db",
    "get_db_session",
    "close_db",
    "Base",
    "Employee",
    "Task",
    "TaskStatus",
]
