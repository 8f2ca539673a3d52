"""API test fixtures — FastAPI test client over the shared test DB.

Invariants:
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
"""

import pytest
from sqlalchemy import func, select
from httpx import ASGITransport, AsyncClient

from todo_api.infrastructure.database import get_db, DatabaseSessionManager
from todo_api.models.task import Task
import todo_api.infrastructure.database as db_module
from todo_api.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def graphql(client):
    """POST a GraphQL document to /query and return the decoded body."""
    async def _send(query: str, variables: dict | None = None) -> dict:
        payload = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        res = await client.post("/query", json=payload)
        assert res.status_code == 200, res.text
        return res.json()
    return _send


@pytest.fixture
async def seed_task(test_db):
    """Insert a pending task directly into the test DB."""
    task = Task(title="Task 1", description="Description 1", status="pending")
    test_db.add(task)
    await test_db.commit()
    await test_db.refresh(task)
    return task


@pytest.fixture
def task_count(test_db):
    """Count rows with the given id, bypassing the API."""
    async def _count(task_id: int) -> int:
        result = await test_db.execute(
            select(func.count()).select_from(Task).where(Task.id == task_id),
        )
        return result.scalar_one()
    return _count
