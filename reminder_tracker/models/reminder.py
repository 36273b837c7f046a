from datetime import UTC, datetime
from enum import Enum
from typing import Self
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CategoryEnum(str, Enum):
    HEALTH = "Health"
    PERSONAL = "Personal"
    STUDY = "Study"
    WORK = "Work"


class PriorityEnum(str, Enum):
    HIGH = "High"
    LOW = "Low"
    MEDIUM = "Medium"

    @property
    def rank(self) -> int:
        """
        Sort rank of the priority, most urgent first.
        """
        return _PRIORITY_RANKS[self]


_PRIORITY_RANKS = {
    PriorityEnum.HIGH: 1,
    PriorityEnum.MEDIUM: 2,
    PriorityEnum.LOW: 3,
}


class FrequencyEnum(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    NONE = "none"
    WEEKLY = "weekly"

    @property
    def label(self) -> str | None:
        if self == FrequencyEnum.NONE:
            return None
        return self.value.capitalize()


def to_utc(value: datetime) -> datetime:
    """
    Convert a datetime to UTC.

    Naive values, like the ones from a "datetime-local" form input, are interpreted in the host local time.
    """
    return value.astimezone(UTC)


class ReminderModel(BaseModel, frozen=True):
    # Immutable fields
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    id: UUID = Field(default_factory=uuid4)
    is_recurring: bool = False
    recurring_frequency: FrequencyEnum = FrequencyEnum.NONE
    # Editable fields, through a copy
    category: CategoryEnum = CategoryEnum.PERSONAL
    completed: bool = False
    completed_at: datetime | None = None
    description: str = ""
    due_date: datetime
    last_completed_at: datetime | None = None
    priority: PriorityEnum = PriorityEnum.MEDIUM
    title: str = Field(min_length=1)

    @field_validator("created_at", "due_date")
    @classmethod
    def _validate_dates(cls, value: datetime) -> datetime:
        return to_utc(value)

    @field_validator("completed_at", "last_completed_at")
    @classmethod
    def _validate_optional_dates(cls, value: datetime | None) -> datetime | None:
        return to_utc(value) if value is not None else None

    @model_validator(mode="after")
    def _validate_recurrence(self) -> Self:
        """
        A reminder is recurring if and only if it has a frequency.
        """
        if self.is_recurring == (self.recurring_frequency == FrequencyEnum.NONE):
            raise ValueError(
                f"Recurring flag ({self.is_recurring}) does not match frequency ({self.recurring_frequency.value})"
            )
        return self

    @property
    def is_done(self) -> bool:
        """
        Terminal completion, recurring reminders never reach it.
        """
        return self.completed and not self.is_recurring


class ReminderCreateModel(BaseModel):
    """
    Input of the creation form.

    Values are validated here, before any reminder is built. Unknown fields are ignored.
    """

    model_config = ConfigDict(
        extra="ignore",  # Forms may send more than needed
        validate_default=True,  # Missing title and due date must be reported
    )

    category: CategoryEnum = CategoryEnum.PERSONAL
    description: str = ""
    due_date: datetime | None = None
    is_recurring: bool = False
    priority: PriorityEnum = PriorityEnum.MEDIUM
    recurring_frequency: FrequencyEnum = FrequencyEnum.WEEKLY
    title: str = ""

    @field_validator("title", "description")
    @classmethod
    def _validate_text(cls, value: str) -> str:
        return value.strip()

    @field_validator("title")
    @classmethod
    def _validate_title(cls, title: str) -> str:
        if not title:
            raise ValueError("Title is required")
        return title

    @field_validator("due_date")
    @classmethod
    def _validate_due_date(cls, due_date: datetime | None) -> datetime:
        if not due_date:
            raise ValueError("Due date is required")
        return to_utc(due_date)

    @field_validator("due_date", mode="before")
    @classmethod
    def _validate_due_date_empty(cls, due_date: object) -> object:
        # Empty form inputs are sent as blank strings
        if isinstance(due_date, str) and not due_date.strip():
            return None
        return due_date

    @model_validator(mode="after")
    def _validate_frequency(self) -> Self:
        if self.is_recurring and self.recurring_frequency == FrequencyEnum.NONE:
            raise ValueError("Frequency is required for recurring reminders")
        return self

    def to_reminder(self, now: datetime) -> ReminderModel:
        return ReminderModel(
            category=self.category,
            created_at=now,
            description=self.description,
            due_date=self.due_date,  # pyright: ignore
            is_recurring=self.is_recurring,
            priority=self.priority,
            recurring_frequency=(
                self.recurring_frequency if self.is_recurring else FrequencyEnum.NONE
            ),
            title=self.title,
        )
