"""
Pydantic schemas for the /scheduler endpoints.

SchedulerStatus: response showing current scheduler state.
"""

from typing import Optional

from pydantic import BaseModel

from api.schemas.job import JobResponse


class SchedulerStatus(BaseModel):
    """Response body for GET /scheduler/status."""

    pending_count: int
    processed_count: int
    next_job_id: int                     # id the next submitted job will get
    next_job: Optional[JobResponse] = None  # what POST /jobs/process would return
