"""
Health check endpoint.

The scheduler is in-process, so there are no backing services to ping:
if the app can answer, it's healthy. The counts make it a quick smoke test.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_scheduler
from scheduler.job_scheduler import JobScheduler

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    scheduler: JobScheduler = Depends(get_scheduler),
) -> dict:
    return {
        "status": "healthy",
        "pending": scheduler.pending_count,
        "processed": scheduler.processed_count,
    }
