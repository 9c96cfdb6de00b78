from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster_sync.api.v1.router import api_router
from roster_sync.core.config import settings
from roster_sync.services.employee_manager import employee_manager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    try:
        await employee_manager.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize EmployeeManager — continuing without employee API")
    if employee_manager.initialized:
        # Initial roster load; a failure only leaves a status message behind.
        await employee_manager.load()
    yield
    await employee_manager.close()


app = FastAPI(
    title="Roster Sync API",
    description="Employee roster synchronization and form controller",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Roster Sync API"}
