"""
Priority scorer: turns (priority class, age) into one number for the heap.

    score = weight(priority) * 10,000,000 - age_in_seconds

    high   → 3   (score ~ 30,000,000)
    medium → 2   (score ~ 20,000,000)
    low    → 1   (score ~ 10,000,000)
    other  → 2   (unknown or missing priority is treated as medium)

One step of weight is worth 1e7 seconds (about 116 days) of age, so a lower
class only overtakes a higher one when the higher-class task is that much
older. In practice the class decides the order and age only breaks ties
inside a class.

Note the sign: age is SUBTRACTED, so inside one class the task created most
recently scores highest. That is the opposite of classic "aging" (where
waiting raises urgency). It is the current behavior and is pinned by tests;
changing it should be a deliberate decision, not a drive-by fix.

Timestamps may be datetimes or epoch milliseconds. A NaN timestamp yields a
NaN score and undefined ordering; callers must pass valid timestamps.
"""

from datetime import datetime, timezone
from typing import Optional, Union

from models.enums import TaskPriority
from scheduler.base import SchedulableLike, Timestamp

SCORE_MULTIPLIER = 1e7

PRIORITY_WEIGHTS: dict[TaskPriority, int] = {
    TaskPriority.HIGH: 3,
    TaskPriority.MEDIUM: 2,
    TaskPriority.LOW: 1,
}
DEFAULT_WEIGHT = PRIORITY_WEIGHTS[TaskPriority.MEDIUM]


def weight(priority: Optional[Union[TaskPriority, str]]) -> int:
    """Weight for a priority class. Never raises: anything unrecognized → medium."""
    try:
        return PRIORITY_WEIGHTS[TaskPriority(priority)]
    except ValueError:
        return DEFAULT_WEIGHT


def to_epoch_ms(value: Timestamp) -> float:
    """Normalize a datetime or epoch-ms number to epoch milliseconds."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            # SQLite hands back naive datetimes; everything is stored as UTC
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp() * 1000.0
    return float(value)


def score(task: SchedulableLike, now: Timestamp) -> float:
    age_seconds = (to_epoch_ms(now) - to_epoch_ms(task.created_at)) / 1000.0
    return weight(task.priority) * SCORE_MULTIPLIER - age_seconds
