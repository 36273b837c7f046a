from collections.abc import Callable
from datetime import datetime, timedelta

import pytest
from pytest_assume.plugin import assume

from reminder_tracker.helpers.view import (
    filter_reminders,
    get_filtered_view,
    get_next_reminder,
    get_statistics,
    sort_reminders,
)
from reminder_tracker.models.filters import FiltersModel, SortEnum, StatusEnum
from reminder_tracker.models.reminder import (
    CategoryEnum,
    FrequencyEnum,
    PriorityEnum,
    ReminderModel,
)


@pytest.fixture
def reminders(
    make_reminder: Callable[..., ReminderModel],
    now: datetime,
) -> tuple[ReminderModel, ...]:
    return (
        make_reminder(
            category=CategoryEnum.HEALTH,
            description="20-minute cardio session",
            due_date=now + timedelta(hours=8),
            is_recurring=True,
            priority=PriorityEnum.HIGH,
            recurring_frequency=FrequencyEnum.DAILY,
            title="Morning workout",
        ),
        make_reminder(
            category=CategoryEnum.WORK,
            completed=True,
            completed_at=now,
            description="Share progress with the squad",
            due_date=now - timedelta(days=1),
            priority=PriorityEnum.MEDIUM,
            title="Stand-up meeting",
        ),
        make_reminder(
            category=CategoryEnum.PERSONAL,
            description="Plan the weekend dinner",
            due_date=now + timedelta(days=2),
            priority=PriorityEnum.LOW,
            title="Call mom",
        ),
        make_reminder(
            category=CategoryEnum.STUDY,
            description="Chapter 3, exercises 1 to 10",
            due_date=now - timedelta(hours=2),
            priority=PriorityEnum.HIGH,
            title="Math homework",
        ),
    )


def _titles(reminders: list[ReminderModel]) -> list[str]:
    return [reminder.title for reminder in reminders]


@pytest.mark.parametrize(
    "filters, expected",
    [
        pytest.param(
            FiltersModel(),
            ["Morning workout", "Stand-up meeting", "Call mom", "Math homework"],
            id="all",
        ),
        pytest.param(
            FiltersModel(category=CategoryEnum.WORK),
            ["Stand-up meeting"],
            id="category",
        ),
        pytest.param(
            FiltersModel(priority=PriorityEnum.HIGH),
            ["Morning workout", "Math homework"],
            id="priority",
        ),
        pytest.param(
            FiltersModel(status=StatusEnum.ACTIVE),
            ["Morning workout", "Call mom", "Math homework"],
            id="status_active",
        ),
        pytest.param(
            FiltersModel(status=StatusEnum.COMPLETED),
            ["Stand-up meeting"],
            id="status_completed",
        ),
        pytest.param(
            FiltersModel(search="CALL"),
            ["Call mom"],
            id="search_title_case_insensitive",
        ),
        pytest.param(
            FiltersModel(search="squad"),
            ["Stand-up meeting"],
            id="search_description",
        ),
        pytest.param(
            FiltersModel(search="   "),
            ["Morning workout", "Stand-up meeting", "Call mom", "Math homework"],
            id="search_blank",
        ),
        pytest.param(
            FiltersModel(priority=PriorityEnum.HIGH, search="cardio"),
            ["Morning workout"],
            id="combined",
        ),
        pytest.param(
            FiltersModel(category=CategoryEnum.WORK, status=StatusEnum.ACTIVE),
            [],
            id="combined_empty",
        ),
    ],
)
def test_filter(
    expected: list[str],
    filters: FiltersModel,
    reminders: tuple[ReminderModel, ...],
) -> None:
    assume(_titles(filter_reminders(reminders, filters)) == expected)


def test_filter_from_raw_values(reminders: tuple[ReminderModel, ...]) -> None:
    filters = FiltersModel.model_validate(
        {
            "category": "all",
            "priority": "High",
            "search": "",
            "status": "active",
        }
    )

    assume(
        _titles(filter_reminders(reminders, filters))
        == ["Morning workout", "Math homework"]
    )


def test_filter_status_partition(
    make_reminder: Callable[..., ReminderModel],
    now: datetime,
    reminders: tuple[ReminderModel, ...],
) -> None:
    """
    Test active and completed filters split one-off reminders in two, while recurring ones are always active.
    """
    reminders = (
        *reminders,
        # Legacy data, a completed recurring reminder is still active
        make_reminder(
            completed=True,
            is_recurring=True,
            recurring_frequency=FrequencyEnum.WEEKLY,
            title="Weekly review",
        ),
    )
    active = filter_reminders(reminders, FiltersModel(status=StatusEnum.ACTIVE))
    completed = filter_reminders(reminders, FiltersModel(status=StatusEnum.COMPLETED))

    active_ids = {reminder.id for reminder in active}
    completed_ids = {reminder.id for reminder in completed}
    one_off_ids = {reminder.id for reminder in reminders if not reminder.is_recurring}
    recurring_ids = {reminder.id for reminder in reminders if reminder.is_recurring}

    assume(not active_ids & completed_ids)
    assume((active_ids | completed_ids) == {reminder.id for reminder in reminders})
    assume(((active_ids - recurring_ids) | completed_ids) == one_off_ids)
    assume(recurring_ids <= active_ids)


@pytest.mark.parametrize(
    "sort, expected",
    [
        pytest.param(
            SortEnum.DUE_DATE,
            ["Stand-up meeting", "Math homework", "Morning workout", "Call mom"],
            id="due_date",
        ),
        pytest.param(
            SortEnum.PRIORITY,
            ["Morning workout", "Math homework", "Stand-up meeting", "Call mom"],
            id="priority",
        ),
    ],
)
def test_sort(
    expected: list[str],
    reminders: tuple[ReminderModel, ...],
    sort: SortEnum,
) -> None:
    assume(_titles(sort_reminders(reminders, sort)) == expected)


def test_sort_priority_order(make_reminder: Callable[..., ReminderModel]) -> None:
    reminders = [
        make_reminder(priority=PriorityEnum.LOW),
        make_reminder(priority=PriorityEnum.HIGH),
        make_reminder(priority=PriorityEnum.MEDIUM),
    ]

    res = sort_reminders(reminders, SortEnum.PRIORITY)

    assume(
        [reminder.priority for reminder in res]
        == [PriorityEnum.HIGH, PriorityEnum.MEDIUM, PriorityEnum.LOW]
    )


@pytest.mark.parametrize(
    "sort",
    [
        pytest.param(
            SortEnum.CREATED_AT,
            id="created_at",
        ),
        pytest.param(
            SortEnum.DUE_DATE,
            id="due_date",
        ),
        pytest.param(
            SortEnum.PRIORITY,
            id="priority",
        ),
    ],
)
def test_sort_stable(
    make_reminder: Callable[..., ReminderModel],
    sort: SortEnum,
) -> None:
    """
    Test reminders with equal keys keep their relative order.
    """
    reminders = [make_reminder(title=f"Reminder {i}") for i in range(10)]

    assume(sort_reminders(reminders, sort) == reminders)


def test_sort_created_at(
    make_reminder: Callable[..., ReminderModel],
    now: datetime,
) -> None:
    reminders = [
        make_reminder(created_at=now - timedelta(days=2), title="Oldest"),
        make_reminder(created_at=now, title="Newest"),
        make_reminder(created_at=now - timedelta(days=1), title="Middle"),
    ]

    assume(
        _titles(sort_reminders(reminders, SortEnum.CREATED_AT))
        == ["Newest", "Middle", "Oldest"]
    )


def test_filtered_view(reminders: tuple[ReminderModel, ...]) -> None:
    res = get_filtered_view(
        reminders,
        FiltersModel(
            sort=SortEnum.PRIORITY,
            status=StatusEnum.ACTIVE,
        ),
    )

    assume(_titles(res) == ["Morning workout", "Math homework", "Call mom"])


def test_statistics(
    now: datetime,
    reminders: tuple[ReminderModel, ...],
) -> None:
    """
    Test statistics over the whole collection.

    Completed reminders with a past due date still count as overdue.
    """
    res = get_statistics(reminders, now)

    assume(res.total == 4)
    assume(res.completed == 1)
    assume(res.overdue == 2)
    assume(res.recurring == 1)


def test_statistics_now(
    now: datetime,
    reminders: tuple[ReminderModel, ...],
) -> None:
    res = get_statistics(reminders, now + timedelta(days=3))

    assume(res.overdue == 4)


def test_statistics_naive_now(
    now: datetime,
    reminders: tuple[ReminderModel, ...],
) -> None:
    """
    Test a naive time is read as host local time.
    """
    res = get_statistics(reminders, now.replace(tzinfo=None))

    assume(res == get_statistics(reminders, now))


def test_statistics_empty(now: datetime) -> None:
    res = get_statistics((), now)

    assume(res.model_dump() == {"completed": 0, "overdue": 0, "recurring": 0, "total": 0})


def test_next_reminder(reminders: tuple[ReminderModel, ...]) -> None:
    res = get_next_reminder(reminders)

    assert res
    assume(res.title == "Math homework")


def test_next_reminder_tie(
    make_reminder: Callable[..., ReminderModel],
    now: datetime,
) -> None:
    reminders = [
        make_reminder(completed=True, due_date=now - timedelta(days=1), title="Done"),
        make_reminder(due_date=now, title="First"),
        make_reminder(due_date=now, title="Second"),
    ]

    res = get_next_reminder(reminders)

    assert res
    assume(res.title == "First")


def test_next_reminder_none(make_reminder: Callable[..., ReminderModel]) -> None:
    assume(get_next_reminder(()) is None)
    assume(get_next_reminder([make_reminder(completed=True)]) is None)
