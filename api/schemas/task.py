"""
Pydantic schemas for the /api/tasks endpoints.

These are NOT database models. They define the HTTP API contract:
- TaskCreate: request body for creating a task
- TaskUpdate: request body for a partial update (every field optional)
- TaskResponse: a single task
- TaskListResponse: one page of tasks + pagination info
- ScheduledTasksResponse: the user's pending tasks in scheduled order

FastAPI validates incoming data against these automatically.
If someone sends priority="urgent", FastAPI returns a 422 error before our code even runs.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from uuid import UUID

from models.enums import TaskPriority, TaskStatus


class TaskCreate(BaseModel):
    """Request body for POST /api/tasks/."""

    title: str = Field(
        ...,  # ... means required, no default
        min_length=1,
        max_length=100,
        examples=["Write quarterly report"],
    )
    description: Optional[str] = Field(default=None, max_length=500)
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING


class TaskUpdate(BaseModel):
    """Request body for PUT /api/tasks/{id}. Only the fields sent are changed."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None


class TaskResponse(BaseModel):
    id: UUID
    title: str
    description: Optional[str] = None
    priority: str
    status: str
    user_id: UUID
    created_at: datetime
    updated_at: datetime

    # from_attributes=True tells Pydantic to read from SQLAlchemy model attributes
    model_config = {"from_attributes": True}


class TaskMessageResponse(BaseModel):
    """Returned by create and update: a confirmation plus the stored task."""

    message: str
    task: TaskResponse


class Pagination(BaseModel):
    total: int   # total matching tasks (ignoring pagination)
    page: int
    pages: int   # ceil(total / limit)
    limit: int


class TaskListResponse(BaseModel):
    tasks: list[TaskResponse]
    pagination: Pagination


class ScheduledTasksResponse(BaseModel):
    scheduled_tasks: list[TaskResponse]
    count: int
