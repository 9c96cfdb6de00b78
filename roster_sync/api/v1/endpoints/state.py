from __future__ import annotations

from fastapi import APIRouter, Depends

from roster_sync.core.dependencies import get_manager
from roster_sync.models.state import ManagerState
from roster_sync.services.employee_manager import EmployeeManager

router = APIRouter(prefix="/state", tags=["state"])


@router.get("", response_model=ManagerState)
async def get_state(manager: EmployeeManager = Depends(get_manager)):  # noqa: B008
    return manager.snapshot()
