"""
Task Repository implementation using SQLAlchemy.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import logging

from task_distribution.core.interfaces import ITaskRepository
from task_distribution.db.models import Task

logger = logging.getLogger(__name__)


class TaskRepository(ITaskRepository):
    """SQLAlchemy implementation of ITaskRepository."""

    def __init__(self, db_session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            db_session: SQLAlchemy async session
        """
        self._db = db_session

    async def get_by_id(self, task_id: int) -> Optional[Task]:
        result = await self._db.execute(
            select(Task).where(Task.id == task_id)
        )
        return result.scalar_one_or_none()

    async def list_by_employee_id(self, employee_id: int) -> List[Task]:
        result = await self._db.execute(
            select(Task)
            .where(Task.employee_id == employee_id)
            .order_by(Task.id)
        )
        return list(result.scalars().all())

    async def save(self, task: Task) -> Task:
        """
        Insert or update a task.

        New tasks are added to the session; tasks loaded through this
        session are already tracked. Flushing populates generated ids.
        """
        try:
            self._db.add(task)
            await self._db.flush()
            logger.debug(f"💾 Saved task {task.id} (employee={task.employee_id}, status={task.status})")
            return task
        except Exception as e:
            logger.error(f"Failed to save task {task.id}: {e}")
            raise
