from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

EMPLOYEE_ADDED = "Employee added successfully."
EMPLOYEE_UPDATED = "Employee updated successfully."
EMPLOYEE_DELETED = "Employee deleted."
ADD_FAILED = "Error adding employee."
UPDATE_FAILED = "Error updating employee."
DELETE_FAILED = "Error deleting employee."
FETCH_ALL_FAILED = "Failed to fetch employees."
NOT_FOUND = "Employee not found."


def missing_field_message(field: str) -> str:
    return f"Please fill out {field}"


class StatusReporter:
    """Holds the one user-facing message; every write replaces the previous one."""

    def __init__(self) -> None:
        self._message: str | None = None

    @property
    def message(self) -> str | None:
        return self._message

    def report(self, message: str) -> None:
        logger.debug("Status: %s", message)
        self._message = message

    def clear(self) -> None:
        self._message = None
