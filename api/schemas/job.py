"""
Pydantic schemas for the /jobs endpoints.

These are NOT the Job record itself. They define the HTTP API contract:
- JobCreate: what the user sends when submitting a job (request body)
- JobResponse: what we send back for a single job (response body)
- JobListResponse: an ordered list of jobs

This is where job input gets validated. The JobScheduler accepts anything, so
if someone sends priority=99 or a blank name, FastAPI returns a 422 here
before the scheduler ever sees it.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from config.settings import settings
from models.enums import JobStatus, PriorityBand


class JobCreate(BaseModel):
    """Request body for POST /jobs/: what the user provides to submit a job."""

    name: str = Field(
        ...,  # ... means required, no default
        min_length=1,
        max_length=settings.JOB_NAME_MAX_LENGTH,
        examples=["Rebuild search index"],
    )
    priority: int = Field(
        default=settings.DEFAULT_PRIORITY,
        ge=settings.MIN_PRIORITY,
        le=settings.MAX_PRIORITY,
        description="1 = highest priority, 10 = lowest",
    )

    # "   " strips to "" and then fails min_length
    model_config = {"str_strip_whitespace": True}


class JobResponse(BaseModel):
    """Response body for a single job."""

    id: int
    name: str
    priority: int
    priority_band: PriorityBand
    status: JobStatus
    created_at: datetime
    processed_at: Optional[datetime] = None

    # from_attributes=True tells Pydantic to read from the Job dataclass
    # attributes (including the status/priority_band properties)
    model_config = {"from_attributes": True}


class JobListResponse(BaseModel):
    """Ordered list of jobs, returned by GET /jobs/pending and /jobs/processed."""

    jobs: list[JobResponse]
    total: int
