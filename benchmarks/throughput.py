"""
Throughput benchmark: measures add/process jobs/sec for the JobScheduler.

How it works:
1. Submit N jobs with priorities spread across 1..10
2. Process every job until the queue is empty
3. Calculate: throughput = N / phase wall clock time, for each phase

Everything runs in-process, so this measures the data structure and nothing
else. Submission is O(n) per job (sorted-list insert), so expect submission
throughput to fall as N grows while processing stays roughly flat for the
sizes this scheduler is meant for.
"""

import time

from scheduler.job_scheduler import JobScheduler


class ThroughputBenchmark:

    def __init__(self, num_jobs: int = 1000):
        self.num_jobs = num_jobs

    def submit_jobs(self, scheduler: JobScheduler) -> float:
        """Submit N jobs, return elapsed seconds."""
        start = time.perf_counter()
        for i in range(self.num_jobs):
            scheduler.add_job(f"bench-{i}", (i % 10) + 1)  # spread across priorities
        return time.perf_counter() - start

    def process_jobs(self, scheduler: JobScheduler) -> tuple[int, float]:
        """Process until empty, return (jobs processed, elapsed seconds)."""
        processed = 0
        start = time.perf_counter()
        while scheduler.process_next_job() is not None:
            processed += 1
        return processed, time.perf_counter() - start

    def run(self) -> dict:
        """Run both phases against a fresh scheduler."""
        scheduler = JobScheduler()
        submit_sec = self.submit_jobs(scheduler)
        processed, process_sec = self.process_jobs(scheduler)

        return {
            "num_jobs": self.num_jobs,
            "processed": processed,
            "submit_sec": round(submit_sec, 6),
            "process_sec": round(process_sec, 6),
            "submit_jobs_per_sec": round(self.num_jobs / submit_sec, 2) if submit_sec else None,
            "process_jobs_per_sec": round(processed / process_sec, 2) if process_sec else None,
        }

    def run_sizes(self, sizes: list[int]) -> list[dict]:
        """Benchmark several queue sizes to show how insertion cost scales."""
        results = []
        for size in sizes:
            results.append(ThroughputBenchmark(num_jobs=size).run())
        return results
