"""
Employee repository for data access.

Read-mostly: the HTTP API never creates employees, only the CLI does.
"""

from typing import Optional, List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
import logging

from task_distribution.db.models import Employee
from task_distribution.core.interfaces import IEmployeeRepository
from task_distribution.domain.value_objects import SortDirection

logger = logging.getLogger(__name__)


class EmployeeRepository(IEmployeeRepository):
    """Repository for Employee entity"""

    def __init__(self, session: AsyncSession):
        self._db = session

    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Get employee by database ID (tasks eagerly loaded)"""
        result = await self._db.execute(
            select(Employee)
            .where(Employee.id == employee_id)
            .options(selectinload(Employee.tasks))
        )
        return result.scalar_one_or_none()

    async def list_all(self, sort: Optional[SortDirection] = None) -> List[Employee]:
        """Get all employees, optionally ordered by full name"""
        stmt = select(Employee).options(selectinload(Employee.tasks))

        if sort is None:
            stmt = stmt.order_by(Employee.id)
        elif sort == SortDirection.DESC:
            stmt = stmt.order_by(Employee.full_name.desc(), Employee.id)
        else:
            stmt = stmt.order_by(Employee.full_name.asc(), Employee.id)

        result = await self._db.execute(stmt)
        return list(result.scalars().all())

    async def add(self, employee: Employee) -> Employee:
        """Insert employee and flush to obtain its id"""
        self._db.add(employee)
        await self._db.flush()
        logger.info(f"💾 Saved employee {employee.id} ({employee.full_name})")
        return employee
