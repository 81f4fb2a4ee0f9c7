"""Status storage — TTL cache of ship statuses, surveys and scans.

Remembers what the bot last learned from the API so a fresh enough copy can
be reused instead of issuing another request. Expiry is checked when a
record is read; nothing is evicted until ``clear_expired()`` is called.

Not thread-safe. Wrap it in a lock or give it a single owning task if it is
shared.
"""

from __future__ import annotations

import logging

from stagent.infra.clock import Clock, now_or_epoch_zero, system_clock
from stagent.infra.config import settings
from stagent.models.status import Scan, ShipStatus, Survey

logger = logging.getLogger("st-agent.status_storage")

DEFAULT_MAX_AGE_SECONDS = 300


def is_live(expiry: int | None, now: int) -> bool:
    """A record is live while its expiry is unset or still in the future."""
    return expiry is None or expiry > now


class StatusStorage:
    """Three keyed collections sharing one expiry policy.

    Statuses are keyed by ship symbol; surveys and scans by waypoint symbol,
    each in its own namespace. Writes overwrite by key.
    """

    def __init__(
        self,
        max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS,
        clock: Clock = system_clock,
    ) -> None:
        if max_age_seconds < 0:
            raise ValueError(f"max_age_seconds must be >= 0, got {max_age_seconds}")
        self._statuses: dict[str, ShipStatus] = {}
        self._surveys: dict[str, Survey] = {}
        self._scans: dict[str, Scan] = {}
        self._max_age = max_age_seconds
        self._clock = clock

    @classmethod
    def with_max_age(cls, max_age_seconds: int, clock: Clock = system_clock) -> StatusStorage:
        """Storage whose computed expiries are ``max_age_seconds`` after the write.

        0 is allowed: such records are already stale at the next read.
        """
        return cls(max_age_seconds=max_age_seconds, clock=clock)

    @property
    def max_age_seconds(self) -> int:
        return self._max_age

    def _now(self) -> int:
        return now_or_epoch_zero(self._clock)

    # --- Ship statuses ---

    def update_status(self, status: ShipStatus) -> None:
        """Store ``status``, stamping ``last_updated`` and filling a missing expiry."""
        now = self._now()
        expires_at = status.expires_at
        if expires_at is None:
            expires_at = now + self._max_age
        self._statuses[status.ship_symbol] = status.model_copy(
            update={"last_updated": now, "expires_at": expires_at}, deep=True
        )
        logger.debug("Cached status for %s until %d", status.ship_symbol, expires_at)

    def pin_status(self, status: ShipStatus) -> None:
        """Store ``status`` with no expiry; it stays until removed."""
        self._statuses[status.ship_symbol] = status.model_copy(
            update={"last_updated": self._now(), "expires_at": None}, deep=True
        )
        logger.debug("Pinned status for %s", status.ship_symbol)

    def get_status(self, ship_symbol: str) -> ShipStatus | None:
        status = self._statuses.get(ship_symbol)
        if status is None or not is_live(status.expires_at, self._now()):
            return None
        return status.model_copy(deep=True)

    def remove_status(self, ship_symbol: str) -> None:
        self._statuses.pop(ship_symbol, None)

    def is_valid(self, ship_symbol: str) -> bool:
        """True iff the status exists and has an expiry still in the future.

        Note: a pinned status (no expiry) reports False here even though
        ``get_status`` returns it. Callers rely on this, keep it.
        """
        status = self._statuses.get(ship_symbol)
        if status is None or status.expires_at is None:
            return False
        return is_live(status.expires_at, self._now())

    def get_all_valid_statuses(self) -> list[ShipStatus]:
        now = self._now()
        return [
            s.model_copy(deep=True)
            for s in self._statuses.values()
            if is_live(s.expires_at, now)
        ]

    # --- Surveys ---

    def update_survey(self, survey: Survey) -> None:
        """Store ``survey``; an expiration of 0 is replaced with now + max age."""
        expiration = survey.expiration
        if expiration == 0:
            expiration = self._now() + self._max_age
        self._surveys[survey.symbol] = survey.model_copy(
            update={"expiration": expiration}, deep=True
        )
        logger.debug("Cached survey for %s until %d", survey.symbol, expiration)

    def get_survey(self, waypoint_symbol: str) -> Survey | None:
        survey = self._surveys.get(waypoint_symbol)
        if survey is None or not is_live(survey.expiration, self._now()):
            return None
        return survey.model_copy(deep=True)

    def remove_survey(self, waypoint_symbol: str) -> None:
        self._surveys.pop(waypoint_symbol, None)

    def is_survey_valid(self, waypoint_symbol: str) -> bool:
        survey = self._surveys.get(waypoint_symbol)
        return survey is not None and is_live(survey.expiration, self._now())

    def get_all_valid_surveys(self) -> list[Survey]:
        now = self._now()
        return [
            s.model_copy(deep=True)
            for s in self._surveys.values()
            if is_live(s.expiration, now)
        ]

    # --- Scans ---

    def update_scan(self, scan: Scan) -> None:
        """Store ``scan``; an expiration of 0 is replaced with now + max age."""
        expiration = scan.expiration
        if expiration == 0:
            expiration = self._now() + self._max_age
        self._scans[scan.symbol] = scan.model_copy(
            update={"expiration": expiration}, deep=True
        )
        logger.debug("Cached scan for %s until %d", scan.symbol, expiration)

    def get_scan(self, waypoint_symbol: str) -> Scan | None:
        scan = self._scans.get(waypoint_symbol)
        if scan is None or not is_live(scan.expiration, self._now()):
            return None
        return scan.model_copy(deep=True)

    def remove_scan(self, waypoint_symbol: str) -> None:
        self._scans.pop(waypoint_symbol, None)

    def is_scan_valid(self, waypoint_symbol: str) -> bool:
        scan = self._scans.get(waypoint_symbol)
        return scan is not None and is_live(scan.expiration, self._now())

    def get_all_valid_scans(self) -> list[Scan]:
        now = self._now()
        return [
            s.model_copy(deep=True)
            for s in self._scans.values()
            if is_live(s.expiration, now)
        ]

    # --- Housekeeping ---

    def clear_expired(self) -> None:
        """Drop every expired status, survey and scan. Pinned statuses stay."""
        now = self._now()
        removed = 0
        for key, status in list(self._statuses.items()):
            if not is_live(status.expires_at, now):
                del self._statuses[key]
                removed += 1
        for key, survey in list(self._surveys.items()):
            if not is_live(survey.expiration, now):
                del self._surveys[key]
                removed += 1
        for key, scan in list(self._scans.items()):
            if not is_live(scan.expiration, now):
                del self._scans[key]
                removed += 1
        if removed:
            logger.debug("Swept %d expired record(s) at %d", removed, now)

    def __len__(self) -> int:
        # Ship statuses only; surveys and scans are not counted.
        return len(self._statuses)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def is_empty(self) -> bool:
        return not (self._statuses or self._surveys or self._scans)


status_storage = StatusStorage.with_max_age(settings.status_max_age_seconds)
