"""
Pytest configuration and shared fixtures.
"""
import os

# Must be set before task_distribution.config is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest_asyncio

from task_distribution.db.connection import init_db, close_db, new_session
from task_distribution.db.models import Employee, Task, TaskStatus

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function", autouse=True)
async def clean_database():
    """
    Fresh in-memory database for each test.
    """
    await init_db(TEST_DATABASE_URL)

    yield

    await close_db()


@pytest_asyncio.fixture
async def staff(clean_database):
    """
    Seed three employees and their tasks.

    Employee 5 "Petrov Petr"     - tasks 42 (NEW), 43 (IN_PROGRESS)
    Employee 7 "Abramova Anna"   - task 44 (APPOINTED)
    Employee 9 "Sidorov Sergey"  - no tasks
    """
    async with new_session() as session:
        session.add_all([
            Employee(id=5, full_name="Petrov Petr", job_title="Backend developer"),
            Employee(id=7, full_name="Abramova Anna", job_title="QA engineer"),
            Employee(id=9, full_name="Sidorov Sergey", job_title="Analyst"),
        ])
        await session.flush()
        session.add_all([
            Task(id=42, task_name="Fix login bug", task_type="BUG",
                 status=TaskStatus.NEW, priority=1, lead_time=4, employee_id=5),
            Task(id=43, task_name="Add CSV export", task_type="FEATURE",
                 status=TaskStatus.IN_PROGRESS, priority=2, lead_time=16, employee_id=5),
            Task(id=44, task_name="Regression suite", task_type="TEST",
                 status=TaskStatus.APPOINTED, priority=3, lead_time=8, employee_id=7),
        ])
        await session.commit()


async def fetch_task(task_id: int):
    """Read a task straight from the database, bypassing the service."""
    async with new_session() as session:
        return await session.get(Task, task_id)


async def count_tasks() -> int:
    from sqlalchemy import func, select

    async with new_session() as session:
        result = await session.execute(select(func.count()).select_from(Task))
        return result.scalar_one()
