"""
Scheduler status endpoint.

GET /scheduler/status → queue depth, history size, next id, next job

Read-only: peeking at the next job doesn't remove it.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_scheduler
from api.schemas.job import JobResponse
from api.schemas.scheduler import SchedulerStatus
from scheduler.job_scheduler import JobScheduler

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


@router.get("/status", response_model=SchedulerStatus)
async def get_scheduler_status(
    scheduler: JobScheduler = Depends(get_scheduler),
) -> SchedulerStatus:
    """Get current scheduler state."""
    next_job = scheduler.peek_next_job()
    return SchedulerStatus(
        pending_count=scheduler.pending_count,
        processed_count=scheduler.processed_count,
        next_job_id=scheduler.next_job_id,
        next_job=JobResponse.model_validate(next_job) if next_job else None,
    )
