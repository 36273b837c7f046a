from datetime import datetime, timedelta
from math import floor

from reminder_tracker.models.due_status import DueStatusModel, ToneEnum
from reminder_tracker.models.reminder import to_utc

_HOUR = timedelta(hours=1)


def classify(due_date: datetime, now: datetime) -> DueStatusModel:
    """
    Classify the urgency of a due date, relative to now.

    Result must not be stored, it is only valid for the given now. Naive dates are read as host local time.
    """
    diff = to_utc(due_date) - to_utc(now)
    diff_hours = _round(diff / _HOUR)
    abs_hours = abs(diff_hours)

    # Overdue
    if diff < timedelta(0):
        label = (
            f"Trễ {_round(abs_hours / 24)} ngày"
            if abs_hours >= 24
            else f"Trễ {abs_hours} giờ"
        )
        return DueStatusModel(label=label, tone=ToneEnum.OVERDUE)

    # Within a day
    if diff_hours <= 24:
        label = "Sắp đến hạn" if diff_hours <= 1 else f"Còn {diff_hours} giờ"
        return DueStatusModel(label=label, tone=ToneEnum.SOON)

    return DueStatusModel(
        label=f"Còn {_round(diff_hours / 24)} ngày",
        tone=ToneEnum.SCHEDULED,
    )


def _round(value: float) -> int:
    """
    Round half up, 2.5 gives 3 and -2.5 gives -2.
    """
    return floor(value + 0.5)
