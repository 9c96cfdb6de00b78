"""Form actions. These endpoints gate create/update by the current mode."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from roster_sync.core.dependencies import get_manager, require_initialized
from roster_sync.models.employee import UnknownFieldError
from roster_sync.models.state import FieldValue, ManagerState
from roster_sync.services.employee_manager import EmployeeManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/form", tags=["form"])


@router.put("/fields/{name}", response_model=ManagerState)
async def change_field(
    name: str,
    body: FieldValue,
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
):
    try:
        manager.field_changed(name, body.value)
    except UnknownFieldError as err:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown field '{name}'",
        ) from err
    except ValueError as err:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid value for '{name}'",
        ) from err
    return manager.snapshot()


@router.post("/edit/{employee_id}", response_model=ManagerState)
async def begin_edit(
    employee_id: int,
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
):
    if manager.begin_edit(employee_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee {employee_id} is not in the roster",
        )
    return manager.snapshot()


@router.post("/reset", response_model=ManagerState)
async def reset_form(manager: EmployeeManager = Depends(get_manager)):  # noqa: B008
    manager.reset_form()
    return manager.snapshot()


@router.post("/create", response_model=ManagerState)
async def submit_create(manager: EmployeeManager = Depends(get_manager)):  # noqa: B008
    if manager.form.edit_mode:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Form is editing an existing employee; use update",
        )
    require_initialized(manager)
    await manager.submit_create()
    return manager.snapshot()


@router.post("/update", response_model=ManagerState)
async def submit_update(manager: EmployeeManager = Depends(get_manager)):  # noqa: B008
    if not manager.form.edit_mode:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Form is not editing an employee; use create",
        )
    require_initialized(manager)
    await manager.submit_update()
    return manager.snapshot()
