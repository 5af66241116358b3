"""
CLI entry point for the scheduling benchmark.

Usage:
    python -m benchmarks.run_benchmark                          # 1k, 10k, 100k tasks
    python -m benchmarks.run_benchmark --sizes 500 5000         # custom sizes
    python -m benchmarks.run_benchmark --repeats 10
"""

import argparse
import json

from benchmarks.schedule_throughput import ScheduleBenchmark


def main():
    parser = argparse.ArgumentParser(description="Task Scheduler Throughput Benchmark")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[1_000, 10_000, 100_000],
        help="Task counts to benchmark (default: 1000 10000 100000)",
    )
    parser.add_argument(
        "--repeats", type=int, default=5,
        help="Runs per size; the best time is reported (default: 5)",
    )
    args = parser.parse_args()

    print("=== Task Scheduler Throughput Benchmark ===")
    print(f"Sizes: {args.sizes} | Repeats: {args.repeats}\n")

    results = [ScheduleBenchmark(num_tasks=n, repeats=args.repeats).run() for n in args.sizes]

    print("=== RESULTS ===")
    print(json.dumps(results, indent=2))

    # Summary table
    print("\n{:<12} {:>10} {:>18}".format("Tasks", "Best (s)", "Throughput"))
    print("-" * 42)
    for r in results:
        print("{:<12} {:>10.4f} {:>14.1f} t/s".format(
            r["num_tasks"], r["best_sec"], r["throughput_tasks_per_sec"]
        ))


if __name__ == "__main__":
    main()
