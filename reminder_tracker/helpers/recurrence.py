from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from reminder_tracker.models.reminder import FrequencyEnum


def advance(due_date: datetime, frequency: FrequencyEnum) -> datetime:
    """
    Get the next occurrence of a recurring reminder.

    Local time of day is kept. Unknown frequencies, including "none", return the date unchanged.
    """
    if frequency == FrequencyEnum.DAILY:
        return add_days(due_date, 1)
    if frequency == FrequencyEnum.WEEKLY:
        return add_days(due_date, 7)
    if frequency == FrequencyEnum.MONTHLY:
        return _in_local_time(due_date, _add_month)
    return due_date


def add_days(value: datetime, days: int) -> datetime:
    """
    Add calendar days in host local time, the wall clock time is kept across DST changes.
    """
    return _in_local_time(value, lambda local: local + timedelta(days=days))


def _in_local_time(
    value: datetime,
    shift: Callable[[datetime], datetime],
) -> datetime:
    """
    Apply a calendar shift on the host local wall clock, then convert back to UTC.

    Naive values are already local, aware ones are converted first.
    """
    local = value.astimezone().replace(tzinfo=None) if value.tzinfo else value
    return shift(local).astimezone(UTC)


def _add_month(value: datetime) -> datetime:
    """
    Add one calendar month.

    When the target month is too short for the day, extra days overflow into the following month (Jan 31 gives Mar 3, or Mar 2 on leap years).
    """
    year = value.year + value.month // 12
    month = value.month % 12 + 1
    first_day = value.replace(year=year, month=month, day=1)
    return first_day + timedelta(days=value.day - 1)
