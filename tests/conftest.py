"""Shared test fixtures."""

import pytest

from stagent.domain.status_storage import StatusStorage
from stagent.models.status import (
    CargoItem,
    Scan,
    ScanMaterial,
    ShipStatus,
    ShipStatusType,
    Survey,
    SurveySize,
)

START_TIME = 1_700_000_000


class FakeClock:
    """Manually advanced clock returning whole Unix seconds."""

    def __init__(self, now: int = START_TIME) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage(clock):
    return StatusStorage(clock=clock)


def make_status(
    ship_symbol: str = "SHIP-123",
    fuel: int = 100,
    expires_at: int | None = None,
    cargo: list[CargoItem] | None = None,
) -> ShipStatus:
    return ShipStatus(
        ship_symbol=ship_symbol,
        status_type=ShipStatusType.IDLE,
        location="X1-ABCD-1234",
        cargo=cargo or [],
        fuel=fuel,
        expires_at=expires_at,
    )


def make_survey(symbol: str = "X1-ABCD-1234", expiration: int = 0) -> Survey:
    return Survey(
        symbol=symbol,
        deposits=["IRON_ORE", "SILVER"],
        expiration=expiration,
        size=SurveySize.LARGE,
    )


def make_scan(symbol: str = "X1-ABCD-1234", expiration: int = 0) -> Scan:
    return Scan(
        symbol=symbol,
        materials=[
            ScanMaterial(symbol="IRON_ORE", units=100),
            ScanMaterial(symbol="SILVER", units=50),
        ],
        expiration=expiration,
    )
