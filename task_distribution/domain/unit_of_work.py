"""
Unit of Work for transaction management.

Every service operation opens one unit of work: its repository calls share
one session, which is committed on success, rolled back on error and closed
on every exit path.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
import logging

if TYPE_CHECKING:
    from task_distribution.core.interfaces import IEmployeeRepository, ITaskRepository

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Transaction boundary exposing the employee and task repositories."""

    employees: 'IEmployeeRepository'
    tasks: 'ITaskRepository'

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """
        Commit on success, roll back on exception.

        A failing rollback is logged and does not replace the exception
        raised inside the block; close() still discards the transaction.
        """
        try:
            if exc_type is None:
                await self.commit()
            else:
                try:
                    await self.rollback()
                except Exception as e:
                    logger.error(f"❌ Rollback failed after {exc_type.__name__}: {e}", exc_info=True)
        finally:
            await self.close()

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

    @abstractmethod
    async def close(self):
        pass


class SQLAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy implementation of Unit of Work."""

    def __init__(self, session: AsyncSession):
        """
        Args:
            session: SQLAlchemy async session (owned by this unit of work)
        """
        self._session = session

        # Import here to avoid circular dependencies
        from task_distribution.repositories.employee_repository import EmployeeRepository
        from task_distribution.repositories.task_repository import TaskRepository

        self.employees = EmployeeRepository(session)
        self.tasks = TaskRepository(session)

    async def commit(self):
        await self._session.commit()
        logger.debug("Transaction committed")

    async def rollback(self):
        await self._session.rollback()
        logger.debug("Transaction rolled back")

    async def close(self):
        await self._session.close()


def get_unit_of_work() -> AbstractUnitOfWork:
    """
    Open a unit of work on a fresh session from the configured factory.

        async with get_unit_of_work() as uow:
            task = await uow.tasks.get_by_id(task_id)
            # Commit happens on context exit
    """
    from task_distribution.db.connection import new_session

    return SQLAlchemyUnitOfWork(new_session())
