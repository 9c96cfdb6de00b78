from __future__ import annotations

import logging
from typing import Any

from roster_sync.models.employee import Employee
from roster_sync.models.state import LookupState
from roster_sync.services.status_reporter import NOT_FOUND, StatusReporter
from roster_sync.services.sync_client import SyncClient, SyncError

logger = logging.getLogger(__name__)


class LookupPanel:
    """On-demand single-record retrieval, independent of the roster and the form.

    Every failure, whether a missing id or a broken connection, is shown as
    "not found".
    """

    def __init__(self, client: SyncClient, reporter: StatusReporter) -> None:
        self.client = client
        self.reporter = reporter
        self.query = ""
        self._result: Employee | None = None
        self._started = 0

    @property
    def result(self) -> Employee | None:
        return self._result

    def set_query(self, value: Any) -> None:
        self.query = "" if value is None else str(value).strip()

    async def fetch_by_id(self, employee_id: int | str | None = None) -> Employee | None:
        if employee_id is not None:
            self.set_query(employee_id)
        target = self.query

        self._started += 1
        generation = self._started

        if not target:
            self._result = None
            self.reporter.report(NOT_FOUND)
            return None

        try:
            record = await self.client.fetch_one(target)
        except SyncError as err:
            if generation == self._started:
                logger.info("Lookup of employee %r failed: %s", target, err)
                self._result = None
                self.reporter.report(NOT_FOUND)
            return None

        if generation != self._started:
            logger.debug("Discarding stale lookup result for %r", target)
            return None

        self._result = record
        self.reporter.clear()
        return record

    def snapshot(self) -> LookupState:
        return LookupState(query=self.query, result=self._result)
