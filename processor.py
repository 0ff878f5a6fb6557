from datetime import datetime, timedelta

from countdown_state import RemainingTime

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

_ONE_MS = timedelta(milliseconds=1)


def add_zero(value: int) -> str:
    """
    Render a time component for display.

    Parameters
    ----------
    value : int
        A non-negative component value (days, hours, minutes or seconds).

    Returns
    -------
    str
        Two characters with a leading zero for values below 10, otherwise the
        plain decimal string.
    """
    if value < 10:
        return f"0{value}"
    return str(value)

def compute_target(now: datetime, offset_days: int) -> datetime:
    return now + timedelta(days=offset_days)

def remaining_ms(target: datetime, now: datetime) -> int:
    """
    Signed whole milliseconds from `now` until `target`.

    Parameters
    ----------
    target : datetime
        The moment being counted down to.
    now : datetime
        The current moment.

    Returns
    -------
    int
        Floor of the difference in milliseconds; negative once the target
        has passed.
    """
    return (target - now) // _ONE_MS

def split_remaining(ms: int) -> RemainingTime:
    """
    Decompose a non-negative duration into days, hours, minutes and seconds.

    Parameters
    ----------
    ms : int
        Remaining duration in milliseconds. Sub-second precision is dropped.

    Returns
    -------
    RemainingTime
        Whole days plus the hours-within-day, minutes-within-hour and
        seconds-within-minute.

    Raises
    ------
    ValueError
        If `ms` is negative.
    """
    if ms < 0:
        raise ValueError(f"Cannot split a negative duration: {ms} ms")

    total = ms // 1000
    days = total // SECONDS_PER_DAY
    hours = (total % SECONDS_PER_DAY) // SECONDS_PER_HOUR
    minutes = (total % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
    seconds = total % SECONDS_PER_MINUTE
    return RemainingTime(days=days, hours=hours, minutes=minutes, seconds=seconds)
