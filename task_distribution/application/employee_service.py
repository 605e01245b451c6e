"""
Employee Service - Business logic orchestration for task distribution.

This service provides a unified interface for:
- Listing employees (optionally sorted by full name)
- Fetching a single employee with their tasks
- Listing an employee's tasks
- Changing the status of an employee's task
- Assigning a new task to an employee

Every operation runs inside its own Unit of Work: commit on success,
rollback on any raised error.
"""

from typing import Callable, List, Optional
import logging

from task_distribution.application import mapper
from task_distribution.application.dtos import EmployeeDTO, TaskDTO
from task_distribution.db.models import TaskStatus
from task_distribution.domain.errors import EmployeeNotFoundError, TaskNotFoundError
from task_distribution.domain.unit_of_work import AbstractUnitOfWork
from task_distribution.domain.value_objects import parse_enum, parse_sort_direction

logger = logging.getLogger(__name__)


class EmployeeService:
    """
    Application service for employee and task operations.

    Args:
        uow_factory: Zero-argument callable returning a fresh Unit of Work.
            Called once per operation.
    """

    def __init__(self, uow_factory: Callable[[], AbstractUnitOfWork]):
        self._uow_factory = uow_factory

    async def list_employees(self, sort_direction: Optional[str] = None) -> List[EmployeeDTO]:
        """
        List all employees.

        Args:
            sort_direction: None or "" for store order, "ASC"/"DESC" to order by full name

        Raises:
            UnknownValueError: If sort_direction is not ASC or DESC
        """
        if not sort_direction:
            logger.debug("Retrieving all employees without sorting")
            sort = None
        else:
            logger.debug(f"Retrieving employees sorted in {sort_direction} direction")
            sort = parse_sort_direction(sort_direction)

        async with self._uow_factory() as uow:
            employees = await uow.employees.list_all(sort)
            result = mapper.to_employee_dtos(employees)

        logger.debug(f"Retrieved {len(result)} employees")
        return result

    async def get_employee(self, employee_id: int) -> EmployeeDTO:
        """
        Raises:
            EmployeeNotFoundError: If no employee has this id
        """
        logger.info(f"Fetching employee with id: {employee_id}")
        async with self._uow_factory() as uow:
            employee = await uow.employees.get_by_id(employee_id)
            if employee is None:
                raise EmployeeNotFoundError(employee_id)
            result = mapper.to_employee_dto(employee)

        logger.info(f"Employee fetched successfully: {result.id}")
        return result

    async def list_tasks_for_employee(self, employee_id: int) -> List[TaskDTO]:
        """Unknown employees simply have no tasks."""
        logger.debug(f"Fetching tasks for employee with id: {employee_id}")
        async with self._uow_factory() as uow:
            tasks = await uow.tasks.list_by_employee_id(employee_id)
            result = mapper.to_task_dtos(tasks)

        logger.debug(f"Retrieved {len(result)} tasks for employee with id: {employee_id}")
        return result

    async def change_task_status(self, employee_id: int, task_id: int, new_status: str) -> None:
        """
        Set the status of a task owned by the given employee.

        The status string is validated before the store is touched. A task
        owned by a different employee is reported exactly like a missing one.

        Raises:
            UnknownValueError: If new_status is not a TaskStatus name
            TaskNotFoundError: If the task is missing or not owned by employee_id
        """
        logger.debug(
            f"Changing task status for employee with id: {employee_id}, "
            f"task with id: {task_id}, new status: {new_status}"
        )
        status = parse_enum(TaskStatus, new_status, f"Unknown status: {new_status}")

        async with self._uow_factory() as uow:
            task = await uow.tasks.get_by_id(task_id)
            if task is None or task.employee_id != employee_id:
                raise TaskNotFoundError(task_id)

            task.status = status
            await uow.tasks.save(task)

        logger.info(f"Task {task_id} of employee {employee_id} moved to {status.value}")

    async def post_new_task(self, employee_id: int, new_task: TaskDTO) -> TaskDTO:
        """
        Assign a new task to an employee.

        Returns:
            The stored task, including its generated id

        Raises:
            EmployeeNotFoundError: If no employee has this id (nothing is inserted)
        """
        logger.debug(f"Posting new task for employee with id: {employee_id}, new task: {new_task}")
        async with self._uow_factory() as uow:
            employee = await uow.employees.get_by_id(employee_id)
            if employee is None:
                raise EmployeeNotFoundError(employee_id)

            task = mapper.to_task_record(new_task)
            task.employee_id = employee.id
            task.employee = employee
            saved = await uow.tasks.save(task)
            result = mapper.to_task_dto(saved)

        logger.info(f"✅ Task {result.id} assigned to employee {employee_id}")
        return result
