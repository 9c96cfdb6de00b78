from __future__ import annotations

from fastapi import APIRouter, Depends

from roster_sync.core.config import settings
from roster_sync.core.dependencies import get_manager
from roster_sync.services.employee_manager import EmployeeManager

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(manager: EmployeeManager = Depends(get_manager)):  # noqa: B008
    services: dict[str, str] = {}

    try:
        if manager.initialized:
            ok = await manager.client.check_connection()
            services["employee_api"] = "ok" if ok else "error"
        else:
            services["employee_api"] = "not_configured"
    except Exception:
        services["employee_api"] = "error"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
