"""Presence-only validation of a candidate record before submission.

Only completeness is checked: email shape and salary range are left to the
backend.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, NamedTuple

from pydantic import BaseModel

from roster_sync.models.employee import EMPLOYEE_FIELDS
from roster_sync.services.status_reporter import StatusReporter, missing_field_message

logger = logging.getLogger(__name__)


class ValidationResult(NamedTuple):
    ok: bool
    field: str | None = None


def find_unset_field(record: BaseModel | Mapping[str, Any]) -> str | None:
    """Return the first field in ``EMPLOYEE_FIELDS`` order whose value is falsy."""
    values = record.model_dump() if isinstance(record, BaseModel) else record
    for name in EMPLOYEE_FIELDS:
        if not values.get(name):
            return name
    return None


class RecordValidator:
    def __init__(self, reporter: StatusReporter) -> None:
        self.reporter = reporter

    def check(self, record: BaseModel | Mapping[str, Any]) -> ValidationResult:
        field = find_unset_field(record)
        if field is None:
            return ValidationResult(ok=True)

        logger.info("Submission blocked: %s is unset", field)
        self.reporter.report(missing_field_message(field))
        return ValidationResult(ok=False, field=field)
