"""Core module containing interfaces."""

from task_distribution.core.interfaces import IEmployeeRepository, ITaskRepository

__all__ = ["IEmployeeRepository", "ITaskRepository"]
