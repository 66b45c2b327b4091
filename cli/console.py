"""
Interactive console for a JobScheduler.

A menu loop over one scheduler instance:

    1. Add job            → prompts for name + priority, validates, add_job()
    2. Show pending jobs  → list_pending_jobs()
    3. Process next job   → process_next_job()
    4. Show processed     → list_processed_jobs(), newest first
    5. Clear pending      → asks for confirmation, clear_pending_queue()
    6. Clear processed    → clear_processed_history()
    7. Exit

Like the API schemas, this is a front end: it owns input validation and
user feedback, the scheduler owns ordering.

Input and output are plain text streams so tests can drive a whole session
with io.StringIO. Running out of input (Ctrl+D) exits like choice 7.
"""

from typing import Optional, TextIO

from config.settings import settings
from models.job import Job
from scheduler.job_scheduler import JobScheduler

MENU = """
--- Job Scheduling System ---
1. Add job
2. Show pending jobs
3. Process next job
4. Show processed jobs
5. Clear pending queue
6. Clear processed history
7. Exit"""


class EndOfInput(Exception):
    """The input stream ran dry mid-session."""


class Console:

    def __init__(self, scheduler: JobScheduler, stdin: TextIO, stdout: TextIO):
        self._scheduler = scheduler
        self._stdin = stdin
        self._stdout = stdout

    def run(self) -> None:
        handlers = {
            "1": self.add_job,
            "2": self.show_pending,
            "3": self.process_next,
            "4": self.show_processed,
            "5": self.clear_pending,
            "6": self.clear_processed,
        }
        try:
            while True:
                self._write(MENU)
                choice = self._prompt("Enter choice: ")
                if choice == "7":
                    break
                handler = handlers.get(choice)
                if handler is None:
                    self._write("Invalid choice.")
                    continue
                handler()
        except EndOfInput:
            pass
        self._write("Exiting...")

    # ── Menu actions ────────────────────────────────────────────

    def add_job(self) -> None:
        if self._scheduler.pending_count >= settings.MAX_PENDING_JOBS:
            self._write(f"Error: queue full ({settings.MAX_PENDING_JOBS} pending jobs). Cannot add more jobs.")
            return

        name = self._prompt("Enter job name: ")
        if not name:
            self._write("Error: please enter a job name.")
            return
        if len(name) > settings.JOB_NAME_MAX_LENGTH:
            self._write(f"Error: job name is longer than {settings.JOB_NAME_MAX_LENGTH} characters.")
            return

        priority = self._parse_priority(
            self._prompt(f"Enter priority ({settings.MIN_PRIORITY} = highest, {settings.MAX_PRIORITY} = lowest): ")
        )
        if priority is None:
            self._write(
                f"Error: please enter a valid priority between "
                f"{settings.MIN_PRIORITY} and {settings.MAX_PRIORITY}."
            )
            return

        job = self._scheduler.add_job(name, priority)
        self._write(f"Added job: {job.name} (ID: {job.id}, Priority: {job.priority})")

    def show_pending(self) -> None:
        jobs = self._scheduler.list_pending_jobs()
        if not jobs:
            self._write("No jobs in queue.")
            return
        self._write("\n--- Job Queue ---")
        for job in jobs:
            self._write(self._format_job(job, f"Added at: {job.created_at:%H:%M:%S}"))
        self._write("-----------------")

    def process_next(self) -> None:
        job = self._scheduler.process_next_job()
        if job is None:
            self._write("No jobs to process.")
            return
        self._write(f"Processed job: {job.name} (ID: {job.id}, Priority: {job.priority})")

    def show_processed(self) -> None:
        jobs = self._scheduler.list_processed_jobs()
        if not jobs:
            self._write("No processed jobs.")
            return
        self._write("\n--- Processed Jobs (newest first) ---")
        for job in reversed(jobs):
            self._write(self._format_job(job, f"Processed at: {job.processed_at:%H:%M:%S}"))
        self._write("-------------------------------------")

    def clear_pending(self) -> None:
        answer = self._prompt("Are you sure you want to clear the job queue? [y/N]: ")
        if answer.lower() not in ("y", "yes"):
            self._write("Clear cancelled.")
            return
        self._scheduler.clear_pending_queue()
        self._write("Job queue cleared.")

    def clear_processed(self) -> None:
        self._scheduler.clear_processed_history()
        self._write("Processed history cleared.")

    # ── Helpers ─────────────────────────────────────────────────

    @staticmethod
    def _parse_priority(raw: str) -> Optional[int]:
        try:
            priority = int(raw)
        except ValueError:
            return None
        if not settings.MIN_PRIORITY <= priority <= settings.MAX_PRIORITY:
            return None
        return priority

    @staticmethod
    def _format_job(job: Job, time_label: str) -> str:
        return (
            f"ID: {job.id} | Name: {job.name} | Priority: {job.priority} "
            f"[{job.priority_band.value}] | {time_label}"
        )

    def _prompt(self, text: str) -> str:
        self._stdout.write(text)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EndOfInput()
        return line.strip()

    def _write(self, text: str) -> None:
        self._stdout.write(text + "\n")
