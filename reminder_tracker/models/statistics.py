from pydantic import BaseModel


class StatisticsModel(BaseModel, frozen=True):
    completed: int = 0
    overdue: int = 0
    recurring: int = 0
    total: int = 0
