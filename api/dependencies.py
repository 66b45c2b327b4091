"""
FastAPI dependency injection.

How this works:
- create_app() owns ONE JobScheduler and stores it on app.state
- An endpoint declares `scheduler: JobScheduler = Depends(get_scheduler)`
- FastAPI calls get_scheduler() before the endpoint runs and passes it in

There is no module-level singleton scheduler: tests build their own app with
their own scheduler (and a fake clock), and nothing leaks between them.
"""

from fastapi import Request

from scheduler.job_scheduler import JobScheduler


async def get_scheduler(request: Request) -> JobScheduler:
    """Returns the scheduler stored on the app when it was created."""
    return request.app.state.scheduler
