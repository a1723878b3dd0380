"""Fixed-interval polling with an optional deadline.

The check is called immediately, then once per ``interval`` until it returns
something other than ``None`` or raises. Without ``max_wait`` the loop is
unbounded; the backend alone decides when it ends.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, TypeVar

from searchstax_cli.client.errors import PollTimeout

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Poller:
    def __init__(
        self,
        interval: float = 60.0,
        *,
        max_wait: float | None = None,
        sleep: Callable[[float], None] | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        if interval < 0:
            raise ValueError("interval must be >= 0")
        self.interval = interval
        self.max_wait = max_wait
        self._sleep = sleep or time.sleep
        self._clock = clock or time.monotonic

    def pause(self, seconds: float) -> None:
        """Block for a fixed delay between lifecycle phases."""
        if seconds > 0:
            logger.debug("Waiting %.0fs", seconds)
            self._sleep(seconds)

    def poll(self, check: Callable[[], T | None], description: str = "operation") -> T:
        started = self._clock()
        attempt = 0
        while True:
            attempt += 1
            result = check()
            if result is not None:
                logger.debug("%s finished after %d poll(s)", description, attempt)
                return result
            waited = self._clock() - started
            if self.max_wait is not None and waited + self.interval > self.max_wait:
                raise PollTimeout(description, waited, attempt)
            logger.info(
                "%s still in progress (poll %d), checking again in %.0fs",
                description, attempt, self.interval,
            )
            self._sleep(self.interval)
