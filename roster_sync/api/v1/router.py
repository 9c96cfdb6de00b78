from fastapi import APIRouter

from roster_sync.api.v1.endpoints import form, health, lookup, roster, state

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(state.router)
api_router.include_router(form.router)
api_router.include_router(roster.router)
api_router.include_router(lookup.router)
