"""
Transfer objects exposed at the HTTP boundary.

Mirrors of the persisted Employee/Task rows, decoupled from the ORM so
routes never hand SQLAlchemy instances to the response serializer.
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from task_distribution.db.models import TaskStatus


class TaskDTO(BaseModel):
    """Task shape used for reads and for creating a new task"""
    id: Optional[int] = Field(None, description="Task ID (ignored on create)")
    task_name: str = Field(..., description="Short task title")
    task_type: Optional[str] = Field(None, description="Free-form category, e.g. BUG or FEATURE")
    status: Optional[TaskStatus] = Field(None, description="Task status (defaults to NEW on create)")
    priority: Optional[int] = Field(None, description="Priority, higher is more urgent")
    lead_time: Optional[int] = Field(None, description="Estimated effort in hours")
    employee_id: Optional[int] = Field(None, description="Owning employee (set by the server)")

    class Config:
        from_attributes = True


class EmployeeDTO(BaseModel):
    """Employee with the tasks currently assigned to them"""
    id: int
    full_name: str
    job_title: Optional[str] = None
    tasks: List[TaskDTO] = []

    class Config:
        from_attributes = True
