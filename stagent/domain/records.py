"""Turn decoded SpaceTraders payloads into cache records."""

from __future__ import annotations

from datetime import datetime, timezone

from stagent.domain.distance import Asteroid, Waypoint
from stagent.models.api import unwrap_data
from stagent.models.status import (
    CargoItem,
    Scan,
    ScanMaterial,
    ShipStatus,
    ShipStatusType,
    Survey,
    SurveySize,
)

# Only travel is visible from nav state; everything else starts as IDLE and
# is refined by the caller (e.g. MINING after an extract call).
_NAV_STATUS_TYPES = {
    "IN_TRANSIT": ShipStatusType.TRAVELING,
    "IN_ORBIT": ShipStatusType.IDLE,
    "DOCKED": ShipStatusType.IDLE,
}

# The API calls the middle size MODERATE.
_SURVEY_SIZES = {"MODERATE": SurveySize.MEDIUM}


def parse_timestamp(value: str) -> int:
    """ISO-8601 timestamp (``2023-11-04T10:15:00.000Z``) -> Unix seconds."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp())


def ship_status_from_api(ship: dict) -> ShipStatus:
    """Map a ship object to a ShipStatus; expiry is left for the cache to fill."""
    nav = ship["nav"]
    inventory = (ship.get("cargo") or {}).get("inventory") or []
    return ShipStatus(
        ship_symbol=ship["symbol"],
        status_type=_NAV_STATUS_TYPES.get(nav.get("status"), ShipStatusType.IDLE),
        location=nav["waypointSymbol"],
        cargo=[
            CargoItem(trade_symbol=item["symbol"], units=item["units"])
            for item in inventory
        ],
        fuel=(ship.get("fuel") or {}).get("current", 0),
    )


def survey_from_api(survey: dict) -> Survey:
    return Survey(
        symbol=survey["symbol"],
        deposits=[d["symbol"] for d in survey.get("deposits", [])],
        expiration=parse_timestamp(survey["expiration"]),
        size=_SURVEY_SIZES.get(survey["size"], survey["size"]),
        signature=survey.get("signature"),
    )


def surveys_from_api(payload: dict) -> list[Survey]:
    """Map a create-survey response (``data.surveys``) to Surveys."""
    return [survey_from_api(s) for s in unwrap_data(payload)["surveys"]]


def scan_from_extractions(waypoint_symbol: str, yields: list[dict]) -> Scan:
    """Aggregate extraction yields seen at a waypoint into one Scan.

    Units of the same material are summed; materials keep first-seen order.
    """
    totals: dict[str, int] = {}
    for item in yields:
        totals[item["symbol"]] = totals.get(item["symbol"], 0) + item["units"]
    return Scan(
        symbol=waypoint_symbol,
        materials=[ScanMaterial(symbol=s, units=u) for s, u in totals.items()],
    )


def _waypoint_list(payload: dict) -> list[dict]:
    # GET /systems/{s} nests waypoints under data; /systems/{s}/waypoints is a bare list.
    data = unwrap_data(payload)
    if isinstance(data, dict):
        return data.get("waypoints") or []
    return data


def is_asteroid(waypoint: dict) -> bool:
    """ASTEROID, ASTEROID_FIELD, ENGINEERED_ASTEROID, ..."""
    return "ASTEROID" in (waypoint.get("type") or "")


def waypoint_from_api(waypoint: dict) -> Waypoint:
    return Waypoint.at(
        waypoint["symbol"], waypoint["x"], waypoint["y"], type=waypoint.get("type")
    )


def waypoints_from_api(payload: dict) -> list[Waypoint]:
    """Map a system (or system-waypoints) response to Waypoints."""
    return [waypoint_from_api(w) for w in _waypoint_list(payload)]


def asteroid_from_api(waypoint: dict) -> Asteroid:
    """Map a waypoint object to an Asteroid; its trait symbols become materials."""
    return Asteroid.at(
        waypoint["symbol"],
        waypoint.get("x", 0),
        waypoint.get("y", 0),
        materials=[t["symbol"] for t in waypoint.get("traits") or []],
    )


def asteroids_from_api(payload: dict) -> list[Asteroid]:
    """Asteroid waypoints of a system response, other waypoint types skipped."""
    return [asteroid_from_api(w) for w in _waypoint_list(payload) if is_asteroid(w)]
