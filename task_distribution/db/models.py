"""
SQLAlchemy ORM models for database tables.

Two tables: employees and the tasks assigned to them.
"""
from sqlalchemy import Column, String, Index, ForeignKey, Integer, Enum
from sqlalchemy.orm import relationship, declarative_base
import enum

Base = declarative_base()


# ============================================
# Enums
# ============================================

class TaskStatus(str, enum.Enum):
    """Lifecycle status of a task. Any status may move to any other."""
    NEW = "NEW"
    APPOINTED = "APPOINTED"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    EVALUATED = "EVALUATED"


class Employee(Base):
    """
    Employees table.

    Read-only over HTTP - rows are created with the manage_employees CLI.
    """
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(200), nullable=False)  # Sort key for employee listing
    job_title = Column(String(100), nullable=True)

    __table_args__ = (
        Index('idx_employees_full_name', 'full_name'),
    )

    # Relationships
    tasks = relationship(
        "Task",
        back_populates="employee",
        order_by="Task.id",
        cascade="all, delete-orphan",
    )


class Task(Base):
    """
    Tasks table - work items assigned to exactly one employee.

    employee_id is the ownership field: every employee-scoped task
    operation compares it against the employee id from the request path.
    """
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    task_name = Column(String(200), nullable=False)
    task_type = Column(String(50), nullable=True)  # 'BUG', 'FEATURE', ... (free-form)
    status = Column(Enum(TaskStatus), nullable=False, default=TaskStatus.NEW)
    priority = Column(Integer, nullable=True)
    lead_time = Column(Integer, nullable=True)  # Estimated hours
    employee_id = Column(Integer, ForeignKey('employees.id', ondelete='CASCADE'), nullable=False)

    __table_args__ = (
        Index('idx_tasks_employee_id', 'employee_id'),
    )

    # Relationships
    employee = relationship("Employee", back_populates="tasks")
