"""
CLI entry point for running throughput benchmarks.

Usage:
    python -m benchmarks.run_benchmark                       # 1000 jobs
    python -m benchmarks.run_benchmark --num-jobs 10000      # more jobs
    python -m benchmarks.run_benchmark --scale               # 100, 1k, 10k
"""

import argparse
import json

from benchmarks.throughput import ThroughputBenchmark

SCALE_SIZES = [100, 1_000, 10_000]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Job Scheduler Throughput Benchmark")
    parser.add_argument(
        "--num-jobs", type=int, default=1000,
        help="Number of jobs to submit (default: 1000)",
    )
    parser.add_argument(
        "--scale", action="store_true",
        help=f"Run once per size in {SCALE_SIZES} instead of --num-jobs",
    )
    args = parser.parse_args(argv)

    bench = ThroughputBenchmark(num_jobs=args.num_jobs)
    if args.scale:
        results = bench.run_sizes(SCALE_SIZES)
    else:
        results = [bench.run()]

    print("=== RESULTS ===")
    print(json.dumps(results, indent=2))

    # Summary table
    print("\n{:>10} {:>16} {:>16}".format("Jobs", "Submit (j/s)", "Process (j/s)"))
    print("-" * 44)
    for r in results:
        print("{:>10} {:>16} {:>16}".format(
            r["num_jobs"], r["submit_jobs_per_sec"] or "-", r["process_jobs_per_sec"] or "-"
        ))


if __name__ == "__main__":
    main()
