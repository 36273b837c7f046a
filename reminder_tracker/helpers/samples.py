from datetime import datetime, timedelta

from reminder_tracker.models.reminder import (
    CategoryEnum,
    FrequencyEnum,
    PriorityEnum,
    ReminderModel,
)


def sample_reminders(now: datetime) -> tuple[ReminderModel, ...]:
    """
    Starter reminders, to show a populated list on first use.
    """
    return (
        ReminderModel(
            category=CategoryEnum.HEALTH,
            created_at=now,
            description="20-minute cardio session and stretching routine.",
            due_date=now + timedelta(hours=8),
            is_recurring=True,
            priority=PriorityEnum.HIGH,
            recurring_frequency=FrequencyEnum.DAILY,
            title="Morning workout",
        ),
        ReminderModel(
            category=CategoryEnum.WORK,
            created_at=now,
            description="Share progress with the product squad.",
            due_date=now + timedelta(hours=24),
            is_recurring=True,
            priority=PriorityEnum.MEDIUM,
            recurring_frequency=FrequencyEnum.WEEKLY,
            title="Stand-up meeting",
        ),
        ReminderModel(
            category=CategoryEnum.PERSONAL,
            created_at=now,
            description="Catch up and plan the weekend dinner.",
            due_date=now + timedelta(hours=48),
            priority=PriorityEnum.LOW,
            title="Call mom",
        ),
    )
