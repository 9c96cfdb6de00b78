"""Coordinator wiring the roster, form, lookup and status cells together."""

from __future__ import annotations

import logging
from typing import Any

from roster_sync.core.config import Settings
from roster_sync.models.employee import Employee
from roster_sync.models.state import ManagerState
from roster_sync.services.form_controller import FormController
from roster_sync.services.lookup_panel import LookupPanel
from roster_sync.services.roster_cache import RosterCache
from roster_sync.services.status_reporter import (
    DELETE_FAILED,
    EMPLOYEE_DELETED,
    StatusReporter,
)
from roster_sync.services.sync_client import SyncClient, SyncError

logger = logging.getLogger(__name__)


class EmployeeManager:
    def __init__(self, client: SyncClient | None = None) -> None:
        self.client = client or SyncClient()
        self.status = StatusReporter()
        self.roster = RosterCache(self.client, self.status)
        self.form = FormController(self.client, self.roster, self.status)
        self.lookup = LookupPanel(self.client, self.status)

    @property
    def initialized(self) -> bool:
        return self.client.initialized

    async def initialize(self, settings: Settings) -> None:
        await self.client.initialize(settings)

    async def close(self) -> None:
        await self.client.close()

    async def load(self) -> bool:
        return await self.roster.refresh()

    # Form

    def begin_edit(self, employee_id: int) -> Employee | None:
        record = self.roster.find(employee_id)
        if record is None:
            return None
        self.form.begin_edit(record)
        return record

    def field_changed(self, name: str, value: Any) -> None:
        self.form.field_changed(name, value)

    def reset_form(self) -> None:
        self.form.reset()

    async def submit_create(self) -> bool:
        return await self.form.submit_create()

    async def submit_update(self) -> bool:
        return await self.form.submit_update()

    # Roster

    async def refresh(self) -> bool:
        return await self.roster.refresh()

    async def delete_employee(self, employee_id: int) -> bool:
        """Delete remotely, then re-fetch the roster instead of removing the row locally."""
        try:
            await self.client.delete(employee_id)
        except SyncError:
            logger.exception("Failed to delete employee %s", employee_id)
            self.status.report(DELETE_FAILED)
            return False

        self.status.report(EMPLOYEE_DELETED)
        await self.roster.refresh()
        return True

    # Lookup

    def set_lookup_query(self, value: Any) -> None:
        self.lookup.set_query(value)

    async def fetch_by_id(self, employee_id: int | str | None = None) -> Employee | None:
        return await self.lookup.fetch_by_id(employee_id)

    def snapshot(self) -> ManagerState:
        return ManagerState(
            roster=list(self.roster.records),
            form=self.form.buffer.model_copy(),
            mode=self.form.mode,
            edit_mode=self.form.edit_mode,
            lookup=self.lookup.snapshot(),
            message=self.status.message,
        )


employee_manager = EmployeeManager()
