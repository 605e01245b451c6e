"""
Domain exceptions.

The service raises these; only the HTTP boundary translates them into
status codes (see task_distribution/api/errors.py).
"""
from typing import Any


class DomainError(Exception):
    """Base exception for domain layer errors"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """
    Requested entity does not exist.

    Also raised when a task exists but belongs to another employee, so
    callers cannot probe task ids owned by someone else.
    """
    pass


class EmployeeNotFoundError(NotFoundError):
    """Raised when employee doesn't exist"""

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Employee with id {employee_id} not found")


class TaskNotFoundError(NotFoundError):
    """Raised when task doesn't exist or is not owned by the requested employee"""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task with id {task_id} not found")


class UnknownValueError(DomainError):
    """Raised when a string input is not a member of a closed enumeration"""

    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__(message)
