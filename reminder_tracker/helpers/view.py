"""
Derived views of a reminder collection.

Nothing is cached, views are computed again on every call.
"""

from collections.abc import Iterable
from datetime import datetime

from reminder_tracker.models.filters import ALL, FiltersModel, SortEnum, StatusEnum
from reminder_tracker.models.reminder import ReminderModel, to_utc
from reminder_tracker.models.statistics import StatisticsModel


def filter_reminders(
    reminders: Iterable[ReminderModel],
    filters: FiltersModel,
) -> list[ReminderModel]:
    return [reminder for reminder in reminders if _matches(reminder, filters)]


def sort_reminders(
    reminders: Iterable[ReminderModel],
    sort: SortEnum,
) -> list[ReminderModel]:
    """
    Sort reminders, keeping the input order for equal keys.
    """
    if sort == SortEnum.PRIORITY:
        return sorted(reminders, key=lambda reminder: reminder.priority.rank)
    if sort == SortEnum.CREATED_AT:
        # Newest first, reverse keeps the input order for equal keys
        return sorted(
            reminders, key=lambda reminder: reminder.created_at, reverse=True
        )
    return sorted(reminders, key=lambda reminder: reminder.due_date)


def get_filtered_view(
    reminders: Iterable[ReminderModel],
    filters: FiltersModel,
) -> list[ReminderModel]:
    return sort_reminders(filter_reminders(reminders, filters), filters.sort)


def get_statistics(
    reminders: Iterable[ReminderModel],
    now: datetime,
) -> StatisticsModel:
    """
    Aggregate the whole collection, filters do not apply.

    Past reminders count as overdue even when completed.
    """
    now = to_utc(now)
    reminders = list(reminders)
    return StatisticsModel(
        completed=sum(1 for reminder in reminders if reminder.is_done),
        overdue=sum(1 for reminder in reminders if reminder.due_date < now),
        recurring=sum(1 for reminder in reminders if reminder.is_recurring),
        total=len(reminders),
    )


def get_next_reminder(reminders: Iterable[ReminderModel]) -> ReminderModel | None:
    """
    Get the pending reminder with the earliest due date.

    Recurring reminders are always pending. If several share the earliest date, the first in collection order wins.
    """
    return min(
        (reminder for reminder in reminders if not reminder.completed),
        default=None,
        key=lambda reminder: reminder.due_date,
    )


def _matches(reminder: ReminderModel, filters: FiltersModel) -> bool:
    if filters.category != ALL and reminder.category != filters.category:
        return False

    if filters.priority != ALL and reminder.priority != filters.priority:
        return False

    if filters.status == StatusEnum.COMPLETED and not reminder.is_done:
        return False

    if filters.status == StatusEnum.ACTIVE and reminder.is_done:
        return False

    # Blank search matches everything
    if not filters.search.strip():
        return True

    query = filters.search.lower()
    return query in reminder.title.lower() or query in reminder.description.lower()
