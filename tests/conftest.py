import random
import string
import time
from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from reminder_tracker.helpers.config_models.reminders import RemindersModel
from reminder_tracker.models.reminder import ReminderModel
from reminder_tracker.persistence.memory import MemoryStore


class FrozenClock:
    """
    Clock returning a fixed time, which can be moved forward.
    """

    now: datetime

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def tick(self, delta: timedelta) -> None:
        self.now += delta


# Central Europe, DST ends on 2026-10-25 at 03:00 local time
CET_TIMEZONE = "CET-1CEST,M3.5.0,M10.5.0/3"


def set_timezone(monkeypatch: pytest.MonkeyPatch, timezone: str) -> None:
    """
    Change the host local time zone, for the rest of the test.
    """
    monkeypatch.setenv("TZ", timezone)
    time.tzset()


@pytest.fixture(autouse=True)
def utc_host(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """
    Run every test with UTC as host local time zone.
    """
    set_timezone(monkeypatch, "UTC")
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 10, 19, 8, 30, tzinfo=UTC)


@pytest.fixture
def clock(now: datetime) -> FrozenClock:
    return FrozenClock(now)


@pytest.fixture
def store(clock: FrozenClock) -> MemoryStore:
    return MemoryStore(
        clock=clock,
        config=RemindersModel(),
    )


@pytest.fixture
def random_text() -> str:
    text = "".join(random.choice(string.ascii_letters) for _ in range(32))
    return text


@pytest.fixture
def make_reminder(now: datetime) -> Callable[..., ReminderModel]:
    """
    Build a reminder due in one day, fields can be overridden.
    """

    def _make(**kwargs: Any) -> ReminderModel:
        return ReminderModel(
            **{
                "created_at": now,
                "due_date": now + timedelta(days=1),
                "title": "Drink 2 liters of water",
                **kwargs,
            }
        )

    return _make
