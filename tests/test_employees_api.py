"""
Tests for the employee/task HTTP endpoints.

Uses httpx.AsyncClient over ASGITransport so requests run on the same
event loop as the in-memory database fixture.
"""
import pytest
import pytest_asyncio
import httpx

from task_distribution.api.employees import get_employee_service
from task_distribution.main import app
from tests.conftest import count_tasks, fetch_task
from task_distribution.db.models import TaskStatus

BASE = "/api/v1/employees"


@pytest_asyncio.fixture
async def client():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_root_and_health(client):
    root = await client.get("/")
    health = await client.get("/health")

    assert root.status_code == 200
    assert root.json()["app"] == "Task Distribution Service"
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"


# ============================================
# GET /employees
# ============================================

@pytest.mark.asyncio
async def test_list_employees(client, staff):
    response = await client.get(BASE)

    assert response.status_code == 200
    body = response.json()
    assert [e["id"] for e in body] == [5, 7, 9]
    assert body[0]["full_name"] == "Petrov Petr"
    assert [t["id"] for t in body[0]["tasks"]] == [42, 43]


@pytest.mark.asyncio
async def test_list_employees_sorted(client, staff):
    response = await client.get(BASE, params={"sort": "DESC"})

    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [9, 5, 7]


@pytest.mark.asyncio
async def test_list_employees_empty_sort_means_unsorted(client, staff):
    response = await client.get(BASE, params={"sort": ""})

    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [5, 7, 9]


@pytest.mark.asyncio
async def test_list_employees_unknown_sort(client, staff):
    response = await client.get(BASE, params={"sort": "SIDEWAYS"})

    assert response.status_code == 400
    assert response.text == "Unknown sort direction: SIDEWAYS"


# ============================================
# GET /employees/{id}
# ============================================

@pytest.mark.asyncio
async def test_get_employee(client, staff):
    response = await client.get(f"{BASE}/5")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == 5
    assert body["job_title"] == "Backend developer"
    assert body["tasks"][0]["status"] == "NEW"


@pytest.mark.asyncio
async def test_get_employee_not_found(client, staff):
    response = await client.get(f"{BASE}/12345")

    assert response.status_code == 404
    assert response.text == "Employee with id 12345 not found"
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_get_employee_non_integer_id(client, staff):
    response = await client.get(f"{BASE}/abc")

    assert response.status_code == 400
    assert "employee_id" in response.text


# ============================================
# GET /employees/{id}/tasks
# ============================================

@pytest.mark.asyncio
async def test_list_employee_tasks(client, staff):
    response = await client.get(f"{BASE}/7/tasks")

    assert response.status_code == 200
    tasks = response.json()
    assert len(tasks) == 1
    assert tasks[0]["id"] == 44
    assert tasks[0]["employee_id"] == 7
    assert tasks[0]["status"] == "APPOINTED"


@pytest.mark.asyncio
async def test_list_tasks_unknown_employee(client, staff):
    response = await client.get(f"{BASE}/999/tasks")

    assert response.status_code == 200
    assert response.json() == []


# ============================================
# PATCH /employees/{id}/tasks/{task_id}/status
# ============================================

@pytest.mark.asyncio
async def test_change_task_status(client, staff):
    response = await client.patch(f"{BASE}/5/tasks/42/status", params={"newStatus": "DONE"})

    assert response.status_code == 204
    assert (await fetch_task(42)).status == TaskStatus.DONE


@pytest.mark.asyncio
async def test_change_task_status_wrong_owner(client, staff):
    response = await client.patch(f"{BASE}/7/tasks/42/status", params={"newStatus": "DONE"})

    assert response.status_code == 404
    assert response.text == "Task with id 42 not found"
    assert (await fetch_task(42)).status == TaskStatus.NEW


@pytest.mark.asyncio
async def test_change_task_status_unknown_status(client, staff):
    response = await client.patch(f"{BASE}/5/tasks/42/status", params={"newStatus": "BOGUS"})

    assert response.status_code == 400
    assert response.text == "Unknown status: BOGUS"


@pytest.mark.asyncio
async def test_change_task_status_missing_parameter(client, staff):
    response = await client.patch(f"{BASE}/5/tasks/42/status")

    assert response.status_code == 400
    assert "newStatus" in response.text


# ============================================
# POST /employees/{id}/tasks
# ============================================

@pytest.mark.asyncio
async def test_post_new_task(client, staff):
    payload = {"task_name": "Write docs", "task_type": "FEATURE", "priority": 2, "lead_time": 8}

    response = await client.post(f"{BASE}/9/tasks", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert body["id"] is not None
    assert body["employee_id"] == 9
    assert body["status"] == "NEW"
    assert body["task_name"] == "Write docs"

    tasks = (await client.get(f"{BASE}/9/tasks")).json()
    assert [t["id"] for t in tasks] == [body["id"]]


@pytest.mark.asyncio
async def test_post_new_task_unknown_employee(client, staff):
    before = await count_tasks()

    response = await client.post(f"{BASE}/999/tasks", json={"task_name": "Orphan"})

    assert response.status_code == 404
    assert response.text == "Employee with id 999 not found"
    assert await count_tasks() == before


@pytest.mark.asyncio
async def test_post_new_task_invalid_status(client, staff):
    response = await client.post(f"{BASE}/5/tasks", json={"task_name": "X", "status": "BOGUS"})

    assert response.status_code == 400
    assert "status" in response.text


# ============================================
# Unclassified errors
# ============================================

class _BrokenService:
    async def list_employees(self, sort_direction=None):
        raise RuntimeError("database connection lost")


@pytest.mark.asyncio
async def test_unclassified_error_maps_to_400(client):
    app.dependency_overrides[get_employee_service] = lambda: _BrokenService()

    response = await client.get(BASE)

    assert response.status_code == 400
    assert response.text == "database connection lost"
