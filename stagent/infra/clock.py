"""Wall-clock access in whole Unix seconds, injectable for tests."""

from __future__ import annotations

import logging
import time
from typing import Callable

logger = logging.getLogger("st-agent.clock")

Clock = Callable[[], int]


def system_clock() -> int:
    """Current wall-clock time in whole Unix seconds."""
    return int(time.time())


def now_or_epoch_zero(clock: Clock = system_clock) -> int:
    """Read ``clock``, falling back to the Unix epoch if it cannot be read.

    A failing clock or one reporting a time before 1970 yields 0 rather
    than an error. Records written at "now == 0" therefore expire as early
    as possible, and reads at "now == 0" treat almost everything as live.
    """
    try:
        now = clock()
    except (OSError, OverflowError, ValueError):
        logger.debug("Clock read failed, using the Unix epoch.", exc_info=True)
        return 0
    if now < 0:
        logger.debug("Clock reported %d (before the epoch), using 0.", now)
        return 0
    return int(now)
