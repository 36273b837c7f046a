from enum import Enum
from typing import Literal

from pydantic import BaseModel

from reminder_tracker.models.reminder import CategoryEnum, PriorityEnum

ALL = "all"


class StatusEnum(str, Enum):
    ACTIVE = "active"
    ALL = ALL
    COMPLETED = "completed"


class SortEnum(str, Enum):
    CREATED_AT = "created_at"
    DUE_DATE = "due_date"
    PRIORITY = "priority"


class FiltersModel(BaseModel, frozen=True):
    """
    Criteria of the reminder list view.

    Each criterion is optional, "all" disables it.
    """

    category: CategoryEnum | Literal["all"] = ALL
    priority: PriorityEnum | Literal["all"] = ALL
    search: str = ""
    sort: SortEnum = SortEnum.DUE_DATE
    status: StatusEnum = StatusEnum.ALL
