from __future__ import annotations

import logging

from roster_sync.models.employee import Employee
from roster_sync.services.status_reporter import FETCH_ALL_FAILED, StatusReporter
from roster_sync.services.sync_client import SyncClient, SyncError

logger = logging.getLogger(__name__)


class RosterCache:
    """Last known server roster. Only ever replaced as a whole by ``refresh``."""

    def __init__(self, client: SyncClient, reporter: StatusReporter) -> None:
        self.client = client
        self.reporter = reporter
        self._records: tuple[Employee, ...] = ()
        self._started = 0
        self._applied = 0

    @property
    def records(self) -> tuple[Employee, ...]:
        return self._records

    def find(self, employee_id: int) -> Employee | None:
        for record in self._records:
            if record.id == employee_id:
                return record
        return None

    async def refresh(self) -> bool:
        """Re-fetch the full collection.

        Refreshes can overlap. Each one is numbered when it starts and its
        result is dropped if a later-started refresh has already been applied,
        so an old snapshot never overwrites a newer one.
        """
        self._started += 1
        generation = self._started

        try:
            records = await self.client.fetch_all()
        except SyncError:
            logger.exception("Failed to refresh roster")
            self.reporter.report(FETCH_ALL_FAILED)
            return False

        if generation < self._applied:
            logger.debug("Discarding stale roster (generation %d < %d)", generation, self._applied)
            return False

        self._records = tuple(records)
        self._applied = generation
        logger.info("Roster refreshed: %d employees", len(self._records))
        return True
