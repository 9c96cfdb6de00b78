from __future__ import annotations

from fastapi import APIRouter, Depends

from roster_sync.core.dependencies import get_manager, require_initialized
from roster_sync.models.employee import Employee
from roster_sync.models.state import ManagerState
from roster_sync.services.employee_manager import EmployeeManager

router = APIRouter(prefix="/roster", tags=["roster"])


@router.get("", response_model=list[Employee])
async def list_roster(manager: EmployeeManager = Depends(get_manager)):  # noqa: B008
    return list(manager.roster.records)


@router.post("/refresh", response_model=ManagerState)
async def refresh_roster(manager: EmployeeManager = Depends(get_manager)):  # noqa: B008
    require_initialized(manager)
    await manager.refresh()
    return manager.snapshot()


@router.delete("/{employee_id}", response_model=ManagerState)
async def delete_employee(
    employee_id: int,
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
):
    require_initialized(manager)
    await manager.delete_employee(employee_id)
    return manager.snapshot()
