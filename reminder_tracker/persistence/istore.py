from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime
from typing import Any
from uuid import UUID

from reminder_tracker.helpers.monitoring import start_as_current_span
from reminder_tracker.models.due_status import DueStatusModel
from reminder_tracker.models.error import ErrorModel
from reminder_tracker.models.filters import FiltersModel
from reminder_tracker.models.reminder import ReminderCreateModel, ReminderModel
from reminder_tracker.models.statistics import StatisticsModel


class IStore(ABC):
    @abstractmethod
    @start_as_current_span("store_reminder_create")
    def create_reminder(
        self,
        data: ReminderCreateModel | Mapping[str, Any],
    ) -> ReminderModel | ErrorModel:
        pass

    @abstractmethod
    @start_as_current_span("store_reminder_toggle_complete")
    def toggle_complete(
        self,
        reminder_id: UUID,
    ) -> None:
        pass

    @abstractmethod
    @start_as_current_span("store_reminder_snooze")
    def snooze(
        self,
        reminder_id: UUID,
        days: int | None = None,
    ) -> None:
        pass

    @abstractmethod
    @start_as_current_span("store_reminder_get")
    def reminder_get(
        self,
        reminder_id: UUID,
    ) -> ReminderModel | None:
        pass

    @abstractmethod
    @start_as_current_span("store_filtered_view")
    def get_filtered_view(
        self,
        filters: FiltersModel | None = None,
    ) -> list[ReminderModel]:
        pass

    @abstractmethod
    @start_as_current_span("store_statistics")
    def get_statistics(
        self,
        now: datetime | None = None,
    ) -> StatisticsModel:
        pass

    @abstractmethod
    @start_as_current_span("store_next_reminder")
    def get_next_reminder(self) -> ReminderModel | None:
        pass

    @abstractmethod
    @start_as_current_span("store_due_status")
    def get_due_status(
        self,
        reminder_id: UUID,
        now: datetime | None = None,
    ) -> DueStatusModel | None:
        pass
