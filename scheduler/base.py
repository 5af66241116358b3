"""
The shape of a task as the scheduler sees it.

The scheduler only ever reads two attributes: `priority` and `created_at`.
Anything exposing them can be scheduled: the Task ORM model does, and so
does SchedulableTask below.

SchedulableTask is a lightweight data transfer object (DTO). It lets tests,
benchmarks and non-database callers build inputs without SQLAlchemy,
keeping the scheduler layer independent of the persistence layer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol, Union

from models.enums import TaskPriority

# A datetime (naive values are read as UTC) or epoch milliseconds
Timestamp = Union[datetime, int, float]


class SchedulableLike(Protocol):
    priority: Optional[Union[TaskPriority, str]]
    created_at: Timestamp


@dataclass
class SchedulableTask:
    task_id: str
    priority: Optional[Union[TaskPriority, str]]   # unknown / None → medium
    created_at: Timestamp
