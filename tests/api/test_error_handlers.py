"""REST error handlers — domain errors keep their status, others become a bare 500."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from todo_api.api.error_handlers import register_error_handlers
from todo_api.core.errors import DatabaseError, ResourceNotFoundError


@pytest.fixture
async def failing_client():
    """App with the production handlers and routes that raise on demand."""
    failing_app = FastAPI()
    register_error_handlers(failing_app)

    @failing_app.get("/missing")
    async def missing():
        raise ResourceNotFoundError("Task", "42")

    @failing_app.get("/db-down")
    async def db_down():
        raise DatabaseError("Connection or operational error", "select")

    @failing_app.get("/boom")
    async def boom():
        raise RuntimeError("password=hunter2")

    transport = ASGITransport(app=failing_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def test_domain_error_uses_its_status_and_envelope(failing_client):
    res = await failing_client.get("/missing")

    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["message"] == "Task '42' not found"
    assert error["context"]["task_id"] == "42"


async def test_database_error_maps_to_503(failing_client):
    res = await failing_client.get("/db-down")

    assert res.status_code == 503
    assert res.json()["error"]["code"] == "DATABASE_ERROR"
    assert res.json()["error"]["severity"] == "critical"


async def test_unhandled_error_is_generic_500(failing_client):
    res = await failing_client.get("/boom")

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "hunter2" not in res.text
