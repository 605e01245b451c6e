"""
Mapping between ORM records and transfer objects.

Field-for-field copies; list helpers preserve order and count.
"""
from typing import Iterable, List

from task_distribution.application.dtos import EmployeeDTO, TaskDTO
from task_distribution.db.models import Employee, Task, TaskStatus


def to_task_dto(task: Task) -> TaskDTO:
    return TaskDTO.model_validate(task)


def to_task_dtos(tasks: Iterable[Task]) -> List[TaskDTO]:
    return [to_task_dto(task) for task in tasks]


def to_employee_dto(employee: Employee) -> EmployeeDTO:
    """Employee tasks must already be loaded (repositories use selectinload)."""
    return EmployeeDTO.model_validate(employee)


def to_employee_dtos(employees: Iterable[Employee]) -> List[EmployeeDTO]:
    return [to_employee_dto(employee) for employee in employees]


def to_task_record(dto: TaskDTO) -> Task:
    """
    Build a new, unowned Task row from an incoming DTO.

    The client-supplied id and employee_id are ignored: the database
    assigns the id and the caller attaches the owner. A missing status
    becomes NEW.
    """
    return Task(
        task_name=dto.task_name,
        task_type=dto.task_type,
        status=dto.status or TaskStatus.NEW,
        priority=dto.priority,
        lead_time=dto.lead_time,
    )
