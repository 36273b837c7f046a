"""
Reminder collection mutations.

Collections are tuples of frozen reminders, each mutation returns a new tuple and never touches the given one.
"""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import ValidationError

from reminder_tracker.helpers.recurrence import add_days, advance
from reminder_tracker.models.error import ErrorInnerModel, ErrorModel
from reminder_tracker.models.reminder import (
    ReminderCreateModel,
    ReminderModel,
    to_utc,
)

Reminders = tuple[ReminderModel, ...]


def find_reminder(reminders: Reminders, reminder_id: UUID) -> ReminderModel | None:
    return next(
        (reminder for reminder in reminders if reminder.id == reminder_id),
        None,
    )


def create_reminder(
    reminders: Reminders,
    data: ReminderCreateModel | Mapping[str, Any],
    now: datetime,
) -> tuple[Reminders, ReminderModel | ErrorModel]:
    """
    Create a reminder from the form input and prepend it to the collection.

    If the input is not valid, the collection is returned as is, with an error.
    """
    try:
        form = (
            data
            if isinstance(data, ReminderCreateModel)
            else ReminderCreateModel.model_validate(data)
        )
    except ValidationError as e:
        return reminders, _validation_error(e)

    reminder = form.to_reminder(to_utc(now))
    return (reminder, *reminders), reminder


def toggle_complete(
    reminders: Reminders,
    reminder_id: UUID,
    now: datetime,
) -> Reminders:
    """
    Complete a reminder.

    Recurring reminders move to their next occurrence. Others flip their completion state.
    """
    now = to_utc(now)

    def _toggle(reminder: ReminderModel) -> ReminderModel:
        if reminder.is_recurring:
            return reminder.model_copy(
                update={
                    "due_date": advance(
                        reminder.due_date, reminder.recurring_frequency
                    ),
                    "last_completed_at": now,
                }
            )

        completed = not reminder.completed
        return reminder.model_copy(
            update={
                "completed": completed,
                "completed_at": now if completed else None,
            }
        )

    return _update(reminders, reminder_id, _toggle)


def snooze(
    reminders: Reminders,
    reminder_id: UUID,
    days: int = 1,
) -> Reminders:
    """
    Push the due date of a reminder by whole days, keeping the local time of day.
    """
    return _update(
        reminders,
        reminder_id,
        lambda reminder: reminder.model_copy(
            update={"due_date": add_days(reminder.due_date, days)}
        ),
    )


def _update(
    reminders: Reminders,
    reminder_id: UUID,
    func: Callable[[ReminderModel], ReminderModel],
) -> Reminders:
    return tuple(
        func(reminder) if reminder.id == reminder_id else reminder
        for reminder in reminders
    )


def _validation_error(e: ValidationError) -> ErrorModel:
    details = [
        f"{'.'.join(str(loc) for loc in error['loc']) or 'input'}: {error['msg']}"
        for error in e.errors()
    ]
    return ErrorModel(
        error=ErrorInnerModel(
            message="Reminder values are not valid",
            details=details,
        )
    )
