"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("high", not "TaskPriority.HIGH")
- They work as SQLAlchemy column values
- They work as FastAPI query parameters and request body fields
"""

import enum


class TaskPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"        # default for new tasks and for unknown values when scoring
    HIGH = "high"


class TaskStatus(str, enum.Enum):
    PENDING = "pending"      # still to do, candidate for /tasks/scheduled
    COMPLETED = "completed"  # done, never scheduled
