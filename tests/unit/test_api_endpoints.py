from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from roster_sync.core.dependencies import get_manager
from roster_sync.main import app
from roster_sync.services.employee_manager import EmployeeManager
from roster_sync.services.sync_client import SyncError
from tests.conftest import SAMPLE_EMPLOYEE, SECOND_EMPLOYEE, make_employee


def _fill(client, values: dict) -> None:
    for name, value in values.items():
        response = client.put(f"/api/v1/form/fields/{name}", json={"value": value})
        assert response.status_code == 200


def test_state_endpoint(managed_client):
    response = managed_client.get("/api/v1/state")
    assert response.status_code == 200
    data = response.json()
    assert data["form"] == {name: "" for name in SAMPLE_EMPLOYEE}
    assert data["message"] is None
    assert data["lookup"] == {"query": "", "result": None}


def test_change_field_updates_form(managed_client):
    response = managed_client.put("/api/v1/form/fields/name", json={"value": "Ann"})
    assert response.status_code == 200
    assert response.json()["form"]["name"] == "Ann"


def test_change_unknown_field_is_rejected(managed_client):
    response = managed_client.put("/api/v1/form/fields/nickname", json={"value": "Al"})
    assert response.status_code == 422


def test_create_flow(managed_client, mock_sync_client):
    mock_sync_client.fetch_all = AsyncMock(return_value=[make_employee()])
    _fill(managed_client, SAMPLE_EMPLOYEE)

    response = managed_client.post("/api/v1/form/create")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Employee added successfully."
    assert data["form"]["name"] == ""
    assert [r["id"] for r in data["roster"]] == [1]
    mock_sync_client.create.assert_awaited_once_with(SAMPLE_EMPLOYEE)


def test_create_with_missing_salary(managed_client, mock_sync_client):
    _fill(managed_client, {**SAMPLE_EMPLOYEE, "salary": ""})

    response = managed_client.post("/api/v1/form/create")

    assert response.status_code == 200
    assert response.json()["message"] == "Please fill out salary"
    mock_sync_client.create.assert_not_awaited()


def test_edit_and_update_flow(managed_client, mock_sync_client):
    mock_sync_client.fetch_all = AsyncMock(return_value=[make_employee(**SECOND_EMPLOYEE)])
    managed_client.post("/api/v1/roster/refresh")

    response = managed_client.post("/api/v1/form/edit/7")
    assert response.status_code == 200
    data = response.json()
    assert data["edit_mode"] is True
    assert data["mode"] == {"kind": "editing", "original_id": 7}
    assert data["form"] == SECOND_EMPLOYEE

    assert managed_client.post("/api/v1/form/create").status_code == 409

    response = managed_client.post("/api/v1/form/update")
    assert response.status_code == 200
    assert response.json()["message"] == "Employee updated successfully."
    assert response.json()["edit_mode"] is False
    mock_sync_client.update.assert_awaited_once_with(SECOND_EMPLOYEE)


def test_update_requires_edit_mode(managed_client):
    assert managed_client.post("/api/v1/form/update").status_code == 409


def test_edit_unknown_employee(managed_client):
    assert managed_client.post("/api/v1/form/edit/99").status_code == 404


def test_reset_form(managed_client, mock_sync_client):
    mock_sync_client.fetch_all = AsyncMock(return_value=[make_employee()])
    managed_client.post("/api/v1/roster/refresh")
    managed_client.post("/api/v1/form/edit/1")

    response = managed_client.post("/api/v1/form/reset")

    data = response.json()
    assert data["edit_mode"] is False
    assert data["form"]["id"] == ""


def test_list_roster(managed_client, mock_sync_client):
    mock_sync_client.fetch_all = AsyncMock(return_value=[make_employee(), make_employee(**SECOND_EMPLOYEE)])
    managed_client.post("/api/v1/roster/refresh")

    response = managed_client.get("/api/v1/roster")

    assert response.status_code == 200
    assert response.json() == [SAMPLE_EMPLOYEE, SECOND_EMPLOYEE]


def test_delete_employee(managed_client, mock_sync_client):
    mock_sync_client.fetch_all = AsyncMock(return_value=[])

    response = managed_client.delete("/api/v1/roster/7")

    assert response.status_code == 200
    assert response.json()["message"] == "Employee deleted."
    mock_sync_client.delete.assert_awaited_once_with(7)


def test_delete_failure_message(managed_client, mock_sync_client):
    mock_sync_client.delete = AsyncMock(side_effect=SyncError("500"))

    response = managed_client.delete("/api/v1/roster/7")

    assert response.json()["message"] == "Error deleting employee."


def test_lookup_found(managed_client, mock_sync_client):
    mock_sync_client.fetch_one = AsyncMock(return_value=make_employee(**SECOND_EMPLOYEE))

    response = managed_client.post("/api/v1/lookup", json={"id": 7})

    data = response.json()
    assert data["lookup"]["result"] == SECOND_EMPLOYEE
    assert data["lookup"]["query"] == "7"
    assert data["message"] is None


def test_lookup_with_stored_query(managed_client, mock_sync_client):
    mock_sync_client.fetch_one = AsyncMock(side_effect=SyncError("404"))

    managed_client.put("/api/v1/lookup/query", json={"value": "12"})
    response = managed_client.post("/api/v1/lookup")

    data = response.json()
    assert data["lookup"]["result"] is None
    assert data["message"] == "Employee not found."
    mock_sync_client.fetch_one.assert_awaited_once_with("12")


def test_mutations_unavailable_without_backend(client):
    app.dependency_overrides[get_manager] = lambda: EmployeeManager()

    assert client.post("/api/v1/roster/refresh").status_code == 503
    assert client.delete("/api/v1/roster/1").status_code == 503


@pytest.mark.anyio
async def test_state_via_async_client(async_client, manager):
    app.dependency_overrides[get_manager] = lambda: manager

    response = await async_client.get("/api/v1/state")

    assert response.status_code == 200
    assert response.json()["edit_mode"] is False
