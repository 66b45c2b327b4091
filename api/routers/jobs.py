"""
Job endpoints.

POST   /jobs/              → Submit a new job (goes into the pending queue)
GET    /jobs/pending       → Pending jobs, in the order they will be processed
GET    /jobs/processed     → Processed history (oldest first, or ?newest_first=true)
POST   /jobs/process       → Process the next job (204 if nothing is pending)
DELETE /jobs/pending       → Clear the pending queue (requires ?confirm=true)
DELETE /jobs/processed     → Clear the processed history
GET    /jobs/{job_id}      → Get a single job by id, pending or processed

The API layer is intentionally thin:
- Validate input (Pydantic does this automatically)
- Call the JobScheduler
- Return the response

It does NOT decide ordering; that's the scheduler's job.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from api.dependencies import get_scheduler
from api.schemas.job import JobCreate, JobResponse, JobListResponse
from config.settings import settings
from scheduler.job_scheduler import JobScheduler

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("/", response_model=JobResponse, status_code=201)
async def create_job(
    job_in: JobCreate,
    scheduler: JobScheduler = Depends(get_scheduler),
) -> JobResponse:
    """
    Submit a new job.

    The job goes straight into the pending queue. Nothing runs it until
    someone calls POST /jobs/process.
    """
    if scheduler.pending_count >= settings.MAX_PENDING_JOBS:
        raise HTTPException(
            status_code=409,
            detail=f"Queue full ({settings.MAX_PENDING_JOBS} pending jobs). Process or clear jobs first.",
        )

    job = scheduler.add_job(job_in.name, job_in.priority)
    return JobResponse.model_validate(job)


@router.get("/pending", response_model=JobListResponse)
async def list_pending_jobs(
    scheduler: JobScheduler = Depends(get_scheduler),
) -> JobListResponse:
    """Pending jobs. The first one is what POST /jobs/process returns next."""
    jobs = scheduler.list_pending_jobs()
    return JobListResponse(
        jobs=[JobResponse.model_validate(j) for j in jobs],
        total=len(jobs),
    )


@router.get("/processed", response_model=JobListResponse)
async def list_processed_jobs(
    newest_first: bool = Query(False, description="Most recently processed first"),
    scheduler: JobScheduler = Depends(get_scheduler),
) -> JobListResponse:
    jobs = scheduler.list_processed_jobs()
    if newest_first:
        jobs.reverse()
    return JobListResponse(
        jobs=[JobResponse.model_validate(j) for j in jobs],
        total=len(jobs),
    )


@router.post(
    "/process",
    response_model=JobResponse,
    responses={204: {"description": "No jobs to process"}},
)
async def process_next_job(
    scheduler: JobScheduler = Depends(get_scheduler),
):
    """
    Process the highest-priority pending job.

    An empty queue is not an error, so it gets 204 No Content rather than
    a 404.
    """
    job = scheduler.process_next_job()
    if job is None:
        return Response(status_code=204)
    return JobResponse.model_validate(job)


@router.delete("/pending", status_code=204)
async def clear_pending_queue(
    confirm: bool = Query(False, description="Must be true, this drops every pending job"),
    scheduler: JobScheduler = Depends(get_scheduler),
) -> None:
    """
    Drop every pending job.

    Processed history and the id counter are untouched: the next job submitted
    still gets a fresh id.
    """
    if not confirm:
        raise HTTPException(
            status_code=400,
            detail="Clearing the job queue drops every pending job. Repeat with ?confirm=true.",
        )
    scheduler.clear_pending_queue()


@router.delete("/processed", status_code=204)
async def clear_processed_history(
    scheduler: JobScheduler = Depends(get_scheduler),
) -> None:
    scheduler.clear_processed_history()


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: int,
    scheduler: JobScheduler = Depends(get_scheduler),
) -> JobResponse:
    """Get a single job by id. Looks in the pending queue, then in history."""
    for job in scheduler.list_pending_jobs() + scheduler.list_processed_jobs():
        if job.id == job_id:
            return JobResponse.model_validate(job)
    raise HTTPException(status_code=404, detail=f"Job {job_id} not found")
