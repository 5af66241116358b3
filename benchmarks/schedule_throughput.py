"""
Throughput benchmark: measures how many tasks/sec schedule() can order.

How it works:
1. Build N synthetic tasks spread across the three priority classes,
   with creation times spread over the last 30 days
2. Run schedule() on them `repeats` times with a fixed `now`
3. Report the best wall-clock time and tasks/sec

Runs entirely in-process: no API, no database, no Redis. It measures the
scoring + heap cost only, which is O(n log n).
"""

import random
import time
from datetime import datetime, timedelta, timezone

from models.enums import TaskPriority
from scheduler.base import SchedulableTask
from scheduler.engine import schedule


class ScheduleBenchmark:

    def __init__(self, num_tasks: int = 10_000, repeats: int = 5, seed: int = 42):
        self.num_tasks = num_tasks
        self.repeats = repeats
        self._rng = random.Random(seed)
        self.now = datetime.now(timezone.utc)

    def build_tasks(self) -> list[SchedulableTask]:
        priorities = list(TaskPriority)
        return [
            SchedulableTask(
                task_id=f"bench-{i}",
                priority=self._rng.choice(priorities),
                created_at=self.now - timedelta(seconds=self._rng.uniform(0, 30 * 24 * 3600)),
            )
            for i in range(self.num_tasks)
        ]

    def run(self) -> dict:
        tasks = self.build_tasks()
        timings = []
        for _ in range(self.repeats):
            start = time.perf_counter()
            schedule(tasks, self.now)
            timings.append(time.perf_counter() - start)

        best = min(timings)
        return {
            "num_tasks": self.num_tasks,
            "repeats": self.repeats,
            "best_sec": round(best, 4),
            "throughput_tasks_per_sec": round(self.num_tasks / best, 1) if best else None,
        }
