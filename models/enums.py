"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("PENDING", not "JobStatus.PENDING")
- They work as FastAPI query parameters and response fields
- Typos become immediate errors instead of silent bugs
"""

import enum


class JobStatus(str, enum.Enum):
    PENDING = "PENDING"        # submitted, waiting in the priority queue
    PROCESSED = "PROCESSED"    # dequeued by process_next_job, now in history


class PriorityBand(str, enum.Enum):
    HIGH = "high"              # priority 1-3
    MEDIUM = "medium"          # priority 4-7
    LOW = "low"                # priority 8 and above

    @classmethod
    def for_priority(cls, priority: float) -> "PriorityBand":
        if priority <= 3:
            return cls.HIGH
        if priority <= 7:
            return cls.MEDIUM
        return cls.LOW
