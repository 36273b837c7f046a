from pydantic import BaseModel, Field


class RemindersModel(BaseModel):
    seed_samples: bool = False
    snooze_days: int = Field(
        default=1,  # 1 day
        ge=1,
    )
