"""
Scheduler: orders a snapshot of tasks into "what to work on next".

    tasks ──score──> (task, score) ──enqueue──> BinaryHeap ──dequeue──> ordered list

Each call builds its own heap and throws it away afterwards, so calls share
no state and need no locking. There is no I/O and no suspension point: the
cost is O(n log n) in the number of tasks handed in.

The scheduler does NOT filter, check ownership or persist anything. The
caller decides the candidate set (e.g. one user's pending tasks) and the
scheduler only orders it.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, NamedTuple, Optional

from scheduler.base import SchedulableLike, Timestamp
from scheduler.heap import BinaryHeap
from scheduler.scoring import score

logger = logging.getLogger(__name__)


class ScheduleResult(NamedTuple):
    tasks: list
    count: int


def schedule(
    tasks: Iterable[SchedulableLike],
    now: Optional[Timestamp] = None,
) -> ScheduleResult:
    """
    Return the tasks in descending score order, plus how many there are.

    Args:
        tasks: task-like records exposing `priority` and `created_at`.
               The same objects come back out, nothing is copied.
        now: reference time for ages (datetime or epoch ms).
             Defaults to the current UTC time.

    Equal scores are broken by heap structure, which depends on insertion
    order but is NOT a FIFO guarantee.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    heap = BinaryHeap()
    for task in tasks:
        heap.enqueue(task, score(task, now))

    ordered = []
    while not heap.is_empty():
        ordered.append(heap.dequeue().element)

    logger.debug(f"Scheduled {len(ordered)} tasks")
    return ScheduleResult(tasks=ordered, count=len(ordered))
