"""Cache a saved API payload and show what the status storage reports.

Usage:
    python scripts/inspect_payload.py ship <ship.json>
    python scripts/inspect_payload.py survey <create_survey_response.json>
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from stagent.domain.records import ship_status_from_api, surveys_from_api
from stagent.domain.status_storage import StatusStorage
from stagent.infra.config import settings

KINDS = ("ship", "survey")


def inspect(kind: str, path: str) -> None:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    storage = StatusStorage.with_max_age(settings.status_max_age_seconds)

    if kind == "ship":
        ship = payload.get("data", payload)
        storage.update_status(ship_status_from_api(ship))
        for status in storage.get_all_valid_statuses():
            cargo = ", ".join(f"{c.trade_symbol} x{c.units}" for c in status.cargo) or "empty"
            print(f"{status.ship_symbol}: {status.status_type.value} at {status.location}")
            print(f"  Fuel: {status.fuel}  Cargo: {cargo}")
            print(f"  Expires at: {status.expires_at}")
    else:
        for survey in surveys_from_api(payload):
            storage.update_survey(survey)
        surveys = storage.get_all_valid_surveys()
        if not surveys:
            print("No valid surveys (all expired).")
        for survey in surveys:
            print(f"{survey.symbol} [{survey.size.value}]: {', '.join(survey.deposits)}")
            print(f"  Expires at: {survey.expiration}")

    print(f"Statuses cached: {len(storage)}  Empty: {storage.is_empty()}")


if __name__ == "__main__":
    if len(sys.argv) != 3 or sys.argv[1] not in KINDS:
        print("Usage: python scripts/inspect_payload.py {ship|survey} <file.json>")
        sys.exit(1)
    logging.basicConfig(level=settings.log_level.upper())
    inspect(sys.argv[1], sys.argv[2])
