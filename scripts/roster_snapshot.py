#!/usr/bin/env python3
"""Print the current employee roster, or a single employee, as JSON.

Run from the repository root:

    python3 scripts/roster_snapshot.py [--lookup ID] [--verbose]

The base URL comes from EMPLOYEE_API_URL / EMPLOYEE_API_PATH (environment or .env).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from roster_sync.core.config import Settings  # noqa: E402
from roster_sync.services.employee_manager import EmployeeManager  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch the employee roster (or one employee) and print it as JSON",
    )
    parser.add_argument(
        "--lookup",
        metavar="ID",
        default=None,
        help="Fetch a single employee by id instead of the full roster",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


def render(manager: EmployeeManager, *, lookup: bool) -> dict[str, Any]:
    if lookup:
        result = manager.lookup.result
        data: Any = result.model_dump(mode="json") if result else None
    else:
        data = [record.model_dump(mode="json") for record in manager.roster.records]
    return {"data": data, "message": manager.status.message}


async def snapshot(args: argparse.Namespace, manager: EmployeeManager | None = None) -> int:
    settings = Settings()
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    manager = manager or EmployeeManager()
    await manager.initialize(settings)
    if not manager.initialized:
        logger.error("Employee API is not configured (EMPLOYEE_API_URL)")
        return 2

    try:
        if args.lookup is not None:
            ok = await manager.fetch_by_id(args.lookup) is not None
        else:
            ok = await manager.load()
    finally:
        await manager.close()

    print(json.dumps(render(manager, lookup=args.lookup is not None), indent=2))
    return 0 if ok else 1


def main() -> None:
    args = parse_args()
    sys.exit(asyncio.run(snapshot(args)))


if __name__ == "__main__":
    main()
