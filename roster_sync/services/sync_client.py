"""aiohttp client for the remote employee collection."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any
from urllib.parse import quote

import aiohttp
from pydantic import TypeAdapter, ValidationError

from roster_sync.core.config import Settings
from roster_sync.models.employee import Employee

logger = logging.getLogger(__name__)

_ROSTER_ADAPTER = TypeAdapter(list[Employee])


def _segment(employee_id: int | str) -> str:
    return quote(str(employee_id), safe="")


class SyncError(RuntimeError):
    """Any failed call against the employee API: network, status, or payload."""


class SyncClient:
    def __init__(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.timeout_seconds: float | None = None

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        base_url = settings.employee_api_base
        if not base_url:
            logger.warning("EMPLOYEE_API_URL missing — SyncClient not initialized")
            return

        self.base_url = base_url
        self.timeout_seconds = settings.HTTP_TIMEOUT_SECONDS
        self.initialized = True
        logger.info("SyncClient initialized (base_url=%s)", self.base_url)

    async def close(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.timeout_seconds = None

    async def fetch_all(self) -> list[Employee]:
        body = await self._request("GET", "/all")
        data = self._decode(body, "GET /all")
        try:
            return _ROSTER_ADAPTER.validate_python(data if data is not None else [])
        except ValidationError as err:
            raise SyncError(f"GET /all returned an invalid roster: {err}") from err

    async def fetch_one(self, employee_id: int | str) -> Employee:
        path = f"/get/{_segment(employee_id)}"
        body = await self._request("GET", path)
        data = self._decode(body, f"GET {path}")
        if data is None:
            raise SyncError(f"GET {path} returned an empty body")
        try:
            return Employee.model_validate(data)
        except ValidationError as err:
            raise SyncError(f"GET {path} returned an invalid employee: {err}") from err

    async def create(self, payload: dict[str, Any]) -> Employee | None:
        # POST is not idempotent: submitting twice creates two records.
        body = await self._request("POST", "/add", payload)
        return self._optional_employee(body)

    async def update(self, payload: dict[str, Any]) -> Employee | None:
        body = await self._request("PUT", "/update", payload)
        return self._optional_employee(body)

    async def delete(self, employee_id: int | str) -> None:
        await self._request("DELETE", f"/delete/{_segment(employee_id)}")

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False
        try:
            await self._request("GET", "/all")
            return True
        except SyncError:
            logger.exception("SyncClient connection check failed")
            return False

    async def _request(self, method: str, path: str, payload: dict[str, Any] | None = None) -> str:
        if not self.initialized:
            raise SyncError("SyncClient not initialized")

        url = f"{self.base_url}{path}"
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(method, url, json=payload) as response:
                    body = await response.text()
                    if not 200 <= response.status < 300:
                        raise SyncError(f"{method} {path} failed: {response.status} - {body}")
                    return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise SyncError(f"{method} {path} failed: {err!r}") from err

    @staticmethod
    def _decode(body: str, what: str) -> Any:
        if not body.strip():
            return None
        try:
            return json.loads(body)
        except ValueError as err:
            raise SyncError(f"{what} returned malformed JSON") from err

    @staticmethod
    def _optional_employee(body: str) -> Employee | None:
        # Mutations may answer with the stored record, an empty body, or plain text.
        if not body.strip():
            return None
        try:
            return Employee.model_validate_json(body)
        except ValidationError:
            logger.debug("Mutation response is not an employee record: %.200s", body)
            return None
