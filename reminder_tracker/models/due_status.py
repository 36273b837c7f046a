from enum import Enum

from pydantic import BaseModel


class ToneEnum(str, Enum):
    OVERDUE = "overdue"
    SCHEDULED = "scheduled"
    SOON = "soon"


class DueStatusModel(BaseModel, frozen=True):
    label: str
    tone: ToneEnum
