from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from roster_sync.core.dependencies import get_manager
from roster_sync.main import app
from roster_sync.models.employee import Employee
from roster_sync.services.employee_manager import EmployeeManager
from roster_sync.services.sync_client import SyncClient

SAMPLE_EMPLOYEE: dict = {
    "id": 1,
    "name": "A",
    "gender": "MALE",
    "department": "X",
    "email": "a@a.com",
    "contact": "1",
    "salary": "100",
}

SECOND_EMPLOYEE: dict = {
    "id": 7,
    "name": "Jane Doe",
    "gender": "FEMALE",
    "department": "Engineering",
    "email": "jane.doe@example.com",
    "contact": "+49 123 456789",
    "salary": "5400",
}


def make_employee(**overrides) -> Employee:
    return Employee.model_validate({**SAMPLE_EMPLOYEE, **overrides})


@pytest.fixture(autouse=True)
def _offline_settings():
    from roster_sync.core.config import settings

    original_url = settings.EMPLOYEE_API_URL
    settings.EMPLOYEE_API_URL = ""
    yield
    settings.EMPLOYEE_API_URL = original_url


@pytest.fixture
def mock_sync_client():
    client = MagicMock(spec=SyncClient)
    client.initialized = True
    client.fetch_all = AsyncMock(return_value=[])
    client.fetch_one = AsyncMock(return_value=make_employee())
    client.create = AsyncMock(return_value=None)
    client.update = AsyncMock(return_value=None)
    client.delete = AsyncMock(return_value=None)
    client.check_connection = AsyncMock(return_value=True)
    return client


@pytest.fixture
def manager(mock_sync_client):
    return EmployeeManager(mock_sync_client)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def managed_client(manager):
    app.dependency_overrides[get_manager] = lambda: manager
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def anyio_backend():
    return "asyncio"
