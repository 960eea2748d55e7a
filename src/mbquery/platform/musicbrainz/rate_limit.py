"""Where: src/mbquery/platform/musicbrainz/rate_limit.py
What: Thread-safe scheduler enforcing MusicBrainz WS2 request spacing.
Why: MusicBrainz asks clients to limit traffic to roughly 1 request per second.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Final

from mbquery.config.settings import DEFAULT_REQUEST_DELAY
from mbquery.platform.logging import logger

Clock = Callable[[], float]
Sleeper = Callable[[float], None]


class RequestScheduler:
    """Space out request admissions by at least ``delay`` seconds.

    The lock only guards the timestamp check-and-set; callers perform their
    request after ``admit`` returns, so a slow response never holds up other
    threads beyond the delay window. ``delay`` may be changed at any time by
    any thread and is reread on every loop iteration.
    """

    def __init__(
        self,
        delay: float = DEFAULT_REQUEST_DELAY,
        *,
        clock: Clock = time.monotonic,
        sleep: Sleeper = time.sleep,
    ) -> None:
        self.delay: float = delay
        self._clock: Final[Clock] = clock
        self._sleep: Final[Sleeper] = sleep
        self._lock: Final[threading.Lock] = threading.Lock()
        self._last_admission: float | None = None

    @property
    def last_admission(self) -> float | None:
        """Clock reading of the most recent admission, if any."""

        return self._last_admission

    def admit(self) -> None:
        """Block the caller until the minimum spacing constraint is met."""

        while True:
            delay = self.delay
            if delay <= 0:
                return
            with self._lock:
                now = self._clock()
                if self._last_admission is None or now - self._last_admission >= delay:
                    self._last_admission = now
                    return
            # Half the delay bounds how far past the window a waiter can overshoot.
            pause = delay / 2
            logger.debug("Request throttled; sleeping %.3fs", pause)
            self._sleep(pause)


DEFAULT_SCHEDULER: Final[RequestScheduler] = RequestScheduler(DEFAULT_REQUEST_DELAY)


__all__ = [
    "DEFAULT_SCHEDULER",
    "RequestScheduler",
]
