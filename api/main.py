"""
FastAPI application factory.

This file:
1. Creates the FastAPI app and the JobScheduler it owns
2. Registers all routers (jobs, scheduler, health)
3. Logs startup/shutdown

Every endpoint is `async def`. FastAPI runs plain `def` endpoints in a thread
pool; async ones all run on the event loop thread. Since the scheduler is not
thread-safe, keeping every call on that one thread is what serializes access.

To run:  python -m api.main                  (host/port from settings)
    or:  uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from config.settings import settings
from scheduler.job_scheduler import JobScheduler
from api.routers import jobs, scheduler, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs on startup (before yield) and shutdown (after yield).

    The scheduler is in-memory only: whatever is pending or processed when the
    server stops is gone.
    """
    logger.info(
        f"API ready, priority range {settings.MIN_PRIORITY}-{settings.MAX_PRIORITY}, "
        f"max {settings.MAX_PENDING_JOBS} pending jobs"
    )

    yield

    job_scheduler: JobScheduler = app.state.scheduler
    logger.info(
        f"API shut down, discarding {job_scheduler.pending_count} pending "
        f"and {job_scheduler.processed_count} processed jobs"
    )


def create_app(job_scheduler: Optional[JobScheduler] = None) -> FastAPI:
    """
    Factory function that builds and configures the FastAPI application.

    Pass a JobScheduler to share one (or to inject a fake clock in tests);
    otherwise the app creates its own.
    """
    app = FastAPI(
        title="Priority Job Scheduler",
        description="In-memory job scheduler: submit jobs with a priority, process them one at a time",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.scheduler = job_scheduler if job_scheduler is not None else JobScheduler()

    # Register routers: each one adds its endpoints to the app
    app.include_router(health.router)
    app.include_router(jobs.router)
    app.include_router(scheduler.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()


def run() -> None:
    """Serve `app` on settings.API_HOST:settings.API_PORT."""
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    run()
