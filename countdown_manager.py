from typing import Callable, Optional, Protocol
from datetime import datetime
import logging

from config import CountdownConfig
from countdown_state import CountdownState, RemainingTime
from processor import remaining_ms, split_remaining
from scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class DisplaySink(Protocol):
    def write(self, slot_id: str, text: str) -> None:
        ...


class CountdownManager:
    def __init__(self, state: CountdownState, scheduler: Scheduler, display: DisplaySink,
                 clock: Callable[[], datetime] = datetime.now,
                 config: Optional[CountdownConfig] = None):
        self.state = state
        self.scheduler = scheduler
        self.display = display
        self.clock = clock
        self.config = config or CountdownConfig()

    @property
    def is_running(self) -> bool:
        return self.state.timer is not None and not self.state.expired

    @property
    def is_expired(self) -> bool:
        return self.state.expired

    def start(self) -> Optional[TimerHandle]:
        """Render immediately, then keep ticking every configured interval"""
        if self.is_running or self.is_expired:
            return self.state.timer

        logger.info(f"Counting down to {self.state.target.isoformat()}")
        self.tick()
        if self.is_expired:
            return None

        self.state.timer = self.scheduler.schedule_repeating(
            self.config.interval_seconds, self.tick
        )
        return self.state.timer

    def tick(self) -> Optional[RemainingTime]:
        """One update: sample the clock, then either render or expire"""
        if self.state.expired:
            return None

        now = self.clock()
        distance = remaining_ms(self.state.target, now)
        self.state.ticks += 1

        if distance < 0:
            self._expire()
            return None

        remaining = split_remaining(distance)
        for unit, text in remaining.formatted().items():
            self.display.write(self.config.slot_ids[unit], text)
        self.state.last_rendered = remaining
        logger.debug(f"Tick {self.state.ticks}: {distance} ms remaining")
        return remaining

    def stop(self) -> None:
        """Cancel the timer without showing the expiry message"""
        if self.state.timer is not None:
            self.scheduler.cancel(self.state.timer)
            self.state.timer = None

    def _expire(self) -> None:
        self.state.expired = True
        if self.state.timer is not None:
            self.scheduler.cancel(self.state.timer)
            self.state.timer = None

        if not self.state.message_written:
            self.display.write(self.config.message_slot, self.config.expired_message)
            self.state.message_written = True
        logger.info(f"Countdown expired after {self.state.ticks} tick(s)")
