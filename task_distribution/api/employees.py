"""
Task Distribution API - Employee and Task Endpoints

Thin HTTP layer over EmployeeService. Domain errors propagate out of the
handlers and are translated in task_distribution/api/errors.py.
"""
from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Optional
import logging

from task_distribution.application.dtos import EmployeeDTO, TaskDTO
from task_distribution.application.employee_service import EmployeeService
from task_distribution.domain.unit_of_work import get_unit_of_work

logger = logging.getLogger(__name__)

router = APIRouter()


def get_employee_service() -> EmployeeService:
    """Dependency: service bound to the application's session factory"""
    return EmployeeService(uow_factory=get_unit_of_work)


# ============================================
# Employees
# ============================================

@router.get("/employees", response_model=List[EmployeeDTO])
async def list_employees(
    sort: Optional[str] = Query(None, description="Sort by full name: ASC or DESC"),
    service: EmployeeService = Depends(get_employee_service)
):
    """
    List all employees with their tasks.

    Without `sort` the store order is kept.
    """
    return await service.list_employees(sort)


@router.get("/employees/{employee_id}", response_model=EmployeeDTO)
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service)
):
    """Get one employee by id (404 if missing)"""
    return await service.get_employee(employee_id)


# ============================================
# Tasks
# ============================================

@router.get("/employees/{employee_id}/tasks", response_model=List[TaskDTO])
async def list_employee_tasks(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service)
):
    """List tasks assigned to an employee (empty list for unknown employees)"""
    return await service.list_tasks_for_employee(employee_id)


@router.patch("/employees/{employee_id}/tasks/{task_id}/status", status_code=status.HTTP_204_NO_CONTENT)
async def change_task_status(
    employee_id: int,
    task_id: int,
    new_status: str = Query(..., alias="newStatus", description="Target TaskStatus name, e.g. DONE"),
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Change the status of one of the employee's tasks.

    Returns 404 if the task does not exist or belongs to another employee,
    400 if the status is unknown.
    """
    await service.change_task_status(employee_id, task_id, new_status)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/employees/{employee_id}/tasks", response_model=TaskDTO, status_code=status.HTTP_201_CREATED)
async def post_new_task(
    employee_id: int,
    new_task: TaskDTO,
    service: EmployeeService = Depends(get_employee_service)
):
    """Assign a new task to an employee (status defaults to NEW)"""
    task = await service.post_new_task(employee_id, new_task)
    logger.info(f"Created task {task.id} for employee {employee_id}")
    return task
