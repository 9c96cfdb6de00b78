from __future__ import annotations

from fastapi import HTTPException, status

from roster_sync.services.employee_manager import EmployeeManager, employee_manager


def get_manager() -> EmployeeManager:
    return employee_manager


def require_initialized(manager: EmployeeManager) -> EmployeeManager:
    if not manager.initialized:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee API is not configured",
        )
    return manager
