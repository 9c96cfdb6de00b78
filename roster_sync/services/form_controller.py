"""The single create/edit form and its submission flow."""

from __future__ import annotations

import logging
from typing import Any

from roster_sync.models.employee import Creating, Editing, Employee, EmployeeForm, FormMode
from roster_sync.services.roster_cache import RosterCache
from roster_sync.services.status_reporter import (
    ADD_FAILED,
    EMPLOYEE_ADDED,
    EMPLOYEE_UPDATED,
    UPDATE_FAILED,
    StatusReporter,
)
from roster_sync.services.sync_client import SyncClient, SyncError
from roster_sync.services.validator import RecordValidator

logger = logging.getLogger(__name__)


class FormController:
    """Owns the form buffer and whether it is creating or editing a record.

    Both submit operations are always available; choosing the one that
    matches ``mode`` is up to the caller.
    """

    def __init__(
        self,
        client: SyncClient,
        roster: RosterCache,
        reporter: StatusReporter,
        validator: RecordValidator | None = None,
    ) -> None:
        self.client = client
        self.roster = roster
        self.reporter = reporter
        self.validator = validator or RecordValidator(reporter)
        self._buffer = EmployeeForm.empty()
        self._mode: FormMode = Creating()

    @property
    def buffer(self) -> EmployeeForm:
        return self._buffer

    @property
    def mode(self) -> FormMode:
        return self._mode

    @property
    def edit_mode(self) -> bool:
        return isinstance(self._mode, Editing)

    def begin_edit(self, record: Employee) -> None:
        self._buffer = EmployeeForm.from_employee(record)
        self._mode = Editing(original_id=record.id)
        logger.debug("Editing employee %s", record.id)

    def field_changed(self, name: str, value: Any) -> None:
        self._buffer.set_field(name, value)

    def reset(self) -> None:
        self._buffer = EmployeeForm.empty()
        self._mode = Creating()

    async def submit_create(self) -> bool:
        return await self._submit(self.client.create, EMPLOYEE_ADDED, ADD_FAILED)

    async def submit_update(self) -> bool:
        # The record being edited is addressed by the id it was opened with,
        # whatever the id field holds now.
        original_id = self._mode.original_id if isinstance(self._mode, Editing) else None
        return await self._submit(self.client.update, EMPLOYEE_UPDATED, UPDATE_FAILED, original_id)

    async def _submit(
        self,
        send,
        success_message: str,
        failure_message: str,
        record_id: int | None = None,
    ) -> bool:
        if not self.validator.check(self._buffer).ok:
            return False

        payload = self._buffer.payload()
        if record_id is not None:
            payload["id"] = record_id
        try:
            await send(payload)
        except SyncError:
            logger.exception("Submission failed for employee %s", payload.get("id"))
            self.reporter.report(failure_message)
            return False

        self.reporter.report(success_message)
        self.reset()
        await self.roster.refresh()
        return True
