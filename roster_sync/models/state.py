"""Read-only snapshots of controller state, rendered by the presentation layer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from roster_sync.models.employee import EMPLOYEE_FIELDS, Employee, EmployeeForm, FormMode


class LookupState(BaseModel):
    query: str = ""
    result: Employee | None = None


class ManagerState(BaseModel):
    roster: list[Employee]
    form: EmployeeForm
    mode: FormMode
    edit_mode: bool
    lookup: LookupState
    message: str | None = None
    columns: list[str] = list(EMPLOYEE_FIELDS)


class FieldValue(BaseModel):
    """Request body carrying a single raw input value."""

    value: Any = None


class LookupRequest(BaseModel):
    id: int | str | None = None
