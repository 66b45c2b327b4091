"""
Job record: what the scheduler hands back to its callers.

Key design decisions:
- Integer ids issued by the scheduler: 1, 2, 3, ... never reused, even after
  the job is processed or the queue is cleared
- Frozen: callers holding a pending job cannot change its priority or
  processed_at and break the queue order; processing stores a stamped copy
- status and priority_band are derived, so they can never disagree with
  processed_at / priority
- Timestamps are whatever the scheduler's clock returned (UTC-aware by default)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from models.enums import JobStatus, PriorityBand


@dataclass(frozen=True)
class Job:
    id: int
    name: str
    priority: int  # 1 = highest priority, 10 = lowest (not enforced here)
    created_at: datetime
    processed_at: Optional[datetime] = None

    @property
    def status(self) -> JobStatus:
        return JobStatus.PENDING if self.processed_at is None else JobStatus.PROCESSED

    @property
    def priority_band(self) -> PriorityBand:
        return PriorityBand.for_priority(self.priority)

    def __repr__(self) -> str:
        return f"<Job {self.id} [{self.name}] P{self.priority} {self.status.value}>"
