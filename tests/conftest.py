"""Shared fakes: a manual clock, a recording display and a manual scheduler."""
from datetime import datetime, timedelta

import pytest

from config import CountdownConfig
from scheduler import TimerHandle


START = datetime(2024, 3, 1, 12, 0, 0)


class ManualClock:
    def __init__(self, now: datetime = START) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class RecordingDisplay:
    def __init__(self) -> None:
        self.writes: list[tuple[str, str]] = []

    def write(self, slot_id: str, text: str) -> None:
        self.writes.append((slot_id, text))

    def values(self) -> dict[str, str]:
        return dict(self.writes)

    def writes_to(self, slot_id: str) -> list[str]:
        return [text for slot, text in self.writes if slot == slot_id]


class ManualScheduler:
    """Fires the registered callback only when `fire` is called."""

    def __init__(self) -> None:
        self.handles: list[TimerHandle] = []

    def schedule_repeating(self, interval, callback) -> TimerHandle:
        handle = TimerHandle(interval=interval, callback=callback)
        self.handles.append(handle)
        return handle

    def cancel(self, handle: TimerHandle) -> None:
        handle.cancelled = True

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            for handle in self.handles:
                if not handle.cancelled:
                    handle.fired += 1
                    handle.callback()


class FakePlaceholder:
    def __init__(self) -> None:
        self.markdowns: list[str] = []

    def markdown(self, body, unsafe_allow_html=False) -> None:
        self.markdowns.append(body)

    def empty(self) -> "FakePlaceholder":
        return FakePlaceholder()


class FakeContainer(FakePlaceholder):
    """Stands in for the `st` module inside CountdownUI."""

    def __init__(self) -> None:
        super().__init__()
        self.column_sets: list[list[FakePlaceholder]] = []
        self.empties: list[FakePlaceholder] = []

    def columns(self, n: int) -> list[FakePlaceholder]:
        cols = [FakeContainer() for _ in range(n)]
        self.column_sets.append(cols)
        return cols

    def empty(self) -> FakePlaceholder:
        placeholder = FakePlaceholder()
        self.empties.append(placeholder)
        return placeholder


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def config():
    return CountdownConfig()
