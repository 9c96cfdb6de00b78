from __future__ import annotations

from fastapi import APIRouter, Depends

from roster_sync.core.dependencies import get_manager
from roster_sync.models.state import FieldValue, LookupRequest, ManagerState
from roster_sync.services.employee_manager import EmployeeManager

router = APIRouter(prefix="/lookup", tags=["lookup"])


@router.put("/query", response_model=ManagerState)
async def set_query(
    body: FieldValue,
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
):
    manager.set_lookup_query(body.value)
    return manager.snapshot()


@router.post("", response_model=ManagerState)
async def fetch_by_id(
    body: LookupRequest | None = None,
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
):
    await manager.fetch_by_id(body.id if body else None)
    return manager.snapshot()
