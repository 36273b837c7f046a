from enum import Enum
from functools import cached_property

from pydantic import BaseModel

from reminder_tracker.persistence.istore import IStore


class ModeEnum(str, Enum):
    MEMORY = "memory"


class DatabaseModel(BaseModel):
    mode: ModeEnum = ModeEnum.MEMORY

    @cached_property
    def instance(self) -> IStore:
        from reminder_tracker.helpers.config import CONFIG
        from reminder_tracker.persistence.memory import MemoryStore

        assert self.mode == ModeEnum.MEMORY
        return MemoryStore(CONFIG.reminders)
