import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class SchedulerError(RuntimeError):
    pass


@dataclass
class TimerHandle:
    interval: float
    callback: Callable[[], None]
    cancelled: bool = False
    fired: int = 0


class Scheduler(Protocol):
    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        ...

    def cancel(self, handle: TimerHandle) -> None:
        ...


class BlockingScheduler:
    """Runs one repeating callback on the calling thread.

    `schedule_repeating` only registers the timer; `run` drives it until the
    handle is cancelled, usually from inside the callback itself.
    """

    def __init__(self, sleep: Callable[[float], None] = time.sleep,
                 monotonic: Callable[[], float] = time.monotonic):
        self._sleep = sleep
        self._monotonic = monotonic
        self._handle: Optional[TimerHandle] = None

    @property
    def active(self) -> Optional[TimerHandle]:
        if self._handle is not None and not self._handle.cancelled:
            return self._handle
        return None

    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        if not math.isfinite(interval) or interval <= 0:
            raise ValueError("interval must be a positive finite number")
        if self.active is not None:
            raise SchedulerError("A repeating timer is already scheduled")
        self._handle = TimerHandle(interval=interval, callback=callback)
        logger.debug(f"Scheduled repeating timer every {interval}s")
        return self._handle

    def cancel(self, handle: TimerHandle) -> None:
        if handle.cancelled:
            return
        handle.cancelled = True
        logger.debug(f"Cancelled timer after {handle.fired} tick(s)")

    def run(self) -> None:
        handle = self.active
        if handle is None:
            return

        sleep_time = handle.interval
        while not handle.cancelled:
            if sleep_time > 0:
                self._sleep(sleep_time)
            if handle.cancelled:
                break
            start = self._monotonic()
            handle.fired += 1
            handle.callback()
            elapsed = self._monotonic() - start
            sleep_time = handle.interval - elapsed
