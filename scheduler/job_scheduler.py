"""
JobScheduler: the domain layer on top of PriorityQueue.

It does three things:
    1. Issues job ids (1, 2, 3, ...) and stamps created_at on submission
    2. Delegates ordering to a PriorityQueue keyed on job.priority
    3. Keeps a history of processed jobs, oldest first

Nothing runs in the background. A job only moves from pending to processed
when a caller asks for it with process_next_job():

    add_job()                 process_next_job()
   ───────────>  PENDING  ──────────────────────>  PROCESSED (history)
                 (queue)                           processed_at stamped

Validation is NOT done here. The core accepts any name and any numeric
priority; the API schemas and the console enforce "non-empty name" and
"priority between 1 and 10" before calling in.

Threading: every method runs to completion without I/O or locks. One
scheduler instance must be driven from one thread of control at a time.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Optional

from models.job import Job
from scheduler.priority_queue import PriorityQueue

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JobScheduler:

    def __init__(self, clock: Clock = utc_now):
        self._queue: PriorityQueue[Job] = PriorityQueue()
        self._processed: list[Job] = []
        self._next_id: int = 1
        self._clock = clock

    def add_job(self, name: str, priority: int) -> Job:
        """Create a job with the next id and put it in the pending queue."""
        job = Job(
            id=self._next_id,
            name=name,
            priority=priority,
            created_at=self._clock(),
        )
        self._next_id += 1
        self._queue.enqueue(job, priority)
        logger.debug(f"Queued job {job.id} '{job.name}' (priority {job.priority})")
        return job

    def process_next_job(self) -> Optional[Job]:
        """
        Dequeue the highest-priority job, stamp processed_at, move it to history.

        Returns None when nothing is pending. An empty queue is a normal
        state, not an error.
        """
        entry = self._queue.dequeue()
        if entry is None:
            return None

        job = replace(entry.payload, processed_at=self._clock())
        self._processed.append(job)
        logger.info(f"Processed job {job.id} '{job.name}' (priority {job.priority})")
        return job

    def peek_next_job(self) -> Optional[Job]:
        entry = self._queue.peek()
        return entry.payload if entry else None

    def list_pending_jobs(self) -> list[Job]:
        """Pending jobs in the order process_next_job() will return them."""
        return [entry.payload for entry in self._queue.drain_view()]

    def list_processed_jobs(self) -> list[Job]:
        """Processed jobs, oldest first. Reverse it yourself for newest-first."""
        return list(self._processed)

    def clear_pending_queue(self) -> None:
        dropped = self._queue.size()
        self._queue.clear()
        logger.info(f"Cleared pending queue ({dropped} jobs dropped)")

    def clear_processed_history(self) -> None:
        dropped = len(self._processed)
        self._processed.clear()
        logger.info(f"Cleared processed history ({dropped} jobs)")

    @property
    def pending_count(self) -> int:
        return self._queue.size()

    @property
    def processed_count(self) -> int:
        return len(self._processed)

    @property
    def next_job_id(self) -> int:
        """The id the next add_job() call will assign."""
        return self._next_id
