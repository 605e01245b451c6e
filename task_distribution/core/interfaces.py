"""
Core interfaces for the task distribution service.

Repository contracts consumed by the application layer through the
Unit of Work. Implementations live in task_distribution/repositories/.
"""
from abc import ABC, abstractmethod
from typing import Optional, List, TYPE_CHECKING

if TYPE_CHECKING:
    from task_distribution.db.models import Employee, Task
    from task_distribution.domain.value_objects import SortDirection


class IEmployeeRepository(ABC):
    """
    Interface for employee lookups.

    Returned employees have their tasks collection loaded, so callers may
    map them after the session is gone.
    """

    @abstractmethod
    async def get_by_id(self, employee_id: int) -> Optional['Employee']:
        """
        Get employee by ID.

        Args:
            employee_id: Employee identifier

        Returns:
            Employee if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self, sort: Optional['SortDirection'] = None) -> List['Employee']:
        """
        Get all employees.

        Args:
            sort: None for store-native order, otherwise ordering by full name

        Returns:
            List of employees (may be empty)
        """
        pass

    @abstractmethod
    async def add(self, employee: 'Employee') -> 'Employee':
        """Insert a new employee and populate its generated id."""
        pass


class ITaskRepository(ABC):
    """Interface for task storage and retrieval."""

    @abstractmethod
    async def get_by_id(self, task_id: int) -> Optional['Task']:
        """
        Get task by ID.

        Returns:
            Task if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_employee_id(self, employee_id: int) -> List['Task']:
        """
        Get all tasks owned by an employee, ordered by task id.

        An unknown employee id yields an empty list.
        """
        pass

    @abstractmethod
    async def save(self, task: 'Task') -> 'Task':
        """
        Insert or update a task.

        Returns:
            The persisted task with its id populated
        """
        pass
