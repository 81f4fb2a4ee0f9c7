"""Cached game-state records — ship statuses, surveys, scans."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ShipStatusType(str, Enum):
    IDLE = "IDLE"
    TRAVELING = "TRAVELING"
    MINING = "MINING"
    DELIVERING = "DELIVERING"
    REFUELING = "REFUELING"
    REPAIRING = "REPAIRING"


class SurveySize(str, Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"


class CargoItem(BaseModel):
    trade_symbol: str
    units: int


class ShipStatus(BaseModel):
    ship_symbol: str
    status_type: ShipStatusType
    location: str
    cargo: list[CargoItem] = []
    fuel: int
    last_updated: int = 0  # Unix seconds, stamped by the cache
    expires_at: int | None = None  # None = filled in by the cache on update


class Survey(BaseModel):
    """A survey of a waypoint, keyed by the waypoint symbol."""

    symbol: str
    deposits: list[str] = []
    expiration: int = 0  # 0 = unset, replaced with now + TTL on update
    size: SurveySize
    signature: str | None = None


class ScanMaterial(BaseModel):
    symbol: str
    units: int


class Scan(BaseModel):
    """Materials observed at a waypoint, keyed by the waypoint symbol."""

    symbol: str
    materials: list[ScanMaterial] = []
    expiration: int = 0  # 0 = unset, same convention as Survey
