from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from datetime import datetime


@dataclass(frozen=True)
class RemainingTime:
    days: int
    hours: int
    minutes: int
    seconds: int

    @property
    def total_seconds(self) -> int:
        return self.days * 86400 + self.hours * 3600 + self.minutes * 60 + self.seconds

    def formatted(self) -> Dict[str, str]:
        """Padded display string per unit, keyed by unit name."""
        from processor import add_zero

        return {
            "days": add_zero(self.days),
            "hours": add_zero(self.hours),
            "minutes": add_zero(self.minutes),
            "seconds": add_zero(self.seconds),
        }


@dataclass
class CountdownState:
    target: datetime
    # Timer fields
    timer: Optional[Any] = field(default=None)
    expired: bool = False
    message_written: bool = False
    ticks: int = 0
    last_rendered: Optional[RemainingTime] = field(default=None)

    @classmethod
    def create(cls, now: datetime, offset_days: int) -> "CountdownState":
        from processor import compute_target  # Import here to avoid circular import

        return cls(target=compute_target(now, offset_days))
