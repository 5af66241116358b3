"""Smoke test for the in-process scheduling benchmark."""

from benchmarks.schedule_throughput import ScheduleBenchmark


def test_benchmark_reports_throughput():
    result = ScheduleBenchmark(num_tasks=200, repeats=2, seed=7).run()

    assert result["num_tasks"] == 200
    assert result["repeats"] == 2
    assert result["best_sec"] >= 0


def test_synthetic_tasks_are_reproducible():
    first = ScheduleBenchmark(num_tasks=20, seed=7).build_tasks()
    second = ScheduleBenchmark(num_tasks=20, seed=7).build_tasks()

    assert [t.priority for t in first] == [t.priority for t in second]
    assert len(first) == 20
