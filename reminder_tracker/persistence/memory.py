from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from reminder_tracker.helpers import reminders as mutations, view
from reminder_tracker.helpers.config_models.reminders import RemindersModel
from reminder_tracker.helpers.due_status import classify
from reminder_tracker.helpers.logging import logger
from reminder_tracker.helpers.monitoring import (
    SpanAttributeEnum,
    counter_add,
    reminder_acknowledged,
    reminder_completed,
    reminder_created,
    reminder_rejected,
    reminder_snoozed,
    start_as_current_span,
)
from reminder_tracker.helpers.samples import sample_reminders
from reminder_tracker.models.due_status import DueStatusModel
from reminder_tracker.models.error import ErrorModel
from reminder_tracker.models.filters import FiltersModel
from reminder_tracker.models.reminder import (
    ReminderCreateModel,
    ReminderModel,
    to_utc,
)
from reminder_tracker.models.statistics import StatisticsModel
from reminder_tracker.persistence.istore import IStore


def _utc_now() -> datetime:
    return datetime.now(UTC)


class MemoryStore(IStore):
    """
    A reminder store living in process memory.

    The collection is replaced on each mutation, it is never modified in place. Content is lost when the process exits.
    """

    _clock: Callable[[], datetime]
    _config: RemindersModel
    _reminders: mutations.Reminders

    def __init__(
        self,
        config: RemindersModel,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._clock = clock
        self._config = config
        self._reminders = sample_reminders(self._now()) if config.seed_samples else ()
        logger.debug("Memory store ready with %s reminders", len(self._reminders))

    def _now(self) -> datetime:
        return to_utc(self._clock())

    @property
    def reminders(self) -> mutations.Reminders:
        """
        Current collection, in insertion order, newest first.
        """
        return self._reminders

    @start_as_current_span("store_reminder_create")
    def create_reminder(
        self,
        data: ReminderCreateModel | Mapping[str, Any],
    ) -> ReminderModel | ErrorModel:
        self._reminders, res = mutations.create_reminder(
            data=data,
            now=self._now(),
            reminders=self._reminders,
        )

        # Input rejected, collection is untouched
        if isinstance(res, ErrorModel):
            logger.warning(
                "Reminder rejected: %s", ", ".join(res.error.details)
            )
            counter_add(reminder_rejected, 1)
            return res

        SpanAttributeEnum.REMINDER_ID.attribute(str(res.id))
        SpanAttributeEnum.REMINDER_FREQUENCY.attribute(res.recurring_frequency.value)
        logger.info("Reminder created: %s", res.title)
        counter_add(reminder_created, 1)
        return res

    @start_as_current_span("store_reminder_toggle_complete")
    def toggle_complete(
        self,
        reminder_id: UUID,
    ) -> None:
        SpanAttributeEnum.REMINDER_ID.attribute(str(reminder_id))
        reminder = mutations.find_reminder(self._reminders, reminder_id)
        if not reminder:
            logger.debug("Reminder not found, nothing to complete")
            return

        self._reminders = mutations.toggle_complete(
            now=self._now(),
            reminder_id=reminder_id,
            reminders=self._reminders,
        )

        if reminder.is_recurring:
            SpanAttributeEnum.REMINDER_FREQUENCY.attribute(
                reminder.recurring_frequency.value
            )
            logger.info(
                "Recurring reminder acknowledged, next one on %s",
                self.reminder_get(reminder_id).due_date.isoformat(),  # pyright: ignore
            )
            counter_add(reminder_acknowledged, 1)
            return

        logger.info(
            "Reminder marked as %s", "active" if reminder.completed else "completed"
        )
        counter_add(reminder_completed, 1)

    @start_as_current_span("store_reminder_snooze")
    def snooze(
        self,
        reminder_id: UUID,
        days: int | None = None,
    ) -> None:
        days = days if days is not None else self._config.snooze_days
        SpanAttributeEnum.REMINDER_ID.attribute(str(reminder_id))
        SpanAttributeEnum.SNOOZE_DAYS.attribute(days)
        if not mutations.find_reminder(self._reminders, reminder_id):
            logger.debug("Reminder not found, nothing to snooze")
            return

        self._reminders = mutations.snooze(
            days=days,
            reminder_id=reminder_id,
            reminders=self._reminders,
        )
        logger.info("Reminder snoozed for %s day(s)", days)
        counter_add(reminder_snoozed, 1)

    @start_as_current_span("store_reminder_get")
    def reminder_get(
        self,
        reminder_id: UUID,
    ) -> ReminderModel | None:
        return mutations.find_reminder(self._reminders, reminder_id)

    @start_as_current_span("store_filtered_view")
    def get_filtered_view(
        self,
        filters: FiltersModel | None = None,
    ) -> list[ReminderModel]:
        return view.get_filtered_view(
            filters=filters or FiltersModel(),
            reminders=self._reminders,
        )

    @start_as_current_span("store_statistics")
    def get_statistics(
        self,
        now: datetime | None = None,
    ) -> StatisticsModel:
        return view.get_statistics(
            now=now or self._now(),
            reminders=self._reminders,
        )

    @start_as_current_span("store_next_reminder")
    def get_next_reminder(self) -> ReminderModel | None:
        return view.get_next_reminder(self._reminders)

    @start_as_current_span("store_due_status")
    def get_due_status(
        self,
        reminder_id: UUID,
        now: datetime | None = None,
    ) -> DueStatusModel | None:
        reminder = mutations.find_reminder(self._reminders, reminder_id)
        if not reminder:
            return None
        return classify(
            due_date=reminder.due_date,
            now=now or self._now(),
        )
