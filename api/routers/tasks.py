"""
Task endpoints. Every route requires a bearer token and only ever sees the
caller's own tasks.

POST   /api/tasks/           → Create a task
GET    /api/tasks/           → List tasks with filtering + pagination (cached)
GET    /api/tasks/scheduled  → Pending tasks in "work on next" order (cached)
GET    /api/tasks/{task_id}  → Get a single task (cached)
PUT    /api/tasks/{task_id}  → Partial update
DELETE /api/tasks/{task_id}  → Delete

The API layer is intentionally thin:
- Validate input (Pydantic does this automatically)
- Talk to the database
- Return the response

Ordering lives in scheduler/; this module only loads the candidate set
(the user's PENDING tasks) and hands it over.

Caching: GET responses are cached per user. Every write sends a
CacheInvalidation for that user, so the next GET sees fresh data.
"""

import logging
import math
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from api.auth import get_current_user
from api.cache import CacheInvalidation, ResponseCache
from api.dependencies import get_db, get_cache
from api.schemas.task import (
    Pagination,
    ScheduledTasksResponse,
    TaskCreate,
    TaskListResponse,
    TaskMessageResponse,
    TaskResponse,
    TaskUpdate,
)
from config.settings import settings
from models.enums import TaskPriority, TaskStatus
from models.task import Task
from models.user import User
from scheduler.engine import schedule

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def _cache_key(cache: ResponseCache, request: Request, user: User) -> str:
    return cache.key_for(str(user.id), request.url.path, request.url.query)


async def _get_owned_task(task_id: str, user: User, db: AsyncSession) -> Task:
    """Load a task that belongs to `user`. Malformed ids and other users' tasks are 404."""
    try:
        uid = uuid.UUID(task_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Task not found")

    result = await db.execute(select(Task).where(Task.id == uid, Task.user_id == user.id))
    task = result.scalar_one_or_none()
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.post("/", response_model=TaskMessageResponse, status_code=201)
async def create_task(
    task_in: TaskCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    cache: ResponseCache = Depends(get_cache),
) -> TaskMessageResponse:
    task = Task(
        title=task_in.title,
        description=task_in.description,
        priority=task_in.priority.value,
        status=task_in.status.value,
        user_id=user.id,
    )
    db.add(task)
    await db.commit()
    await db.refresh(task)

    await cache.invalidate(CacheInvalidation(user_id=str(user.id), reason="task created"))
    return TaskMessageResponse(
        message="Task created successfully", task=TaskResponse.model_validate(task)
    )


@router.get("/", response_model=TaskListResponse)
async def list_tasks(
    request: Request,
    status: Optional[TaskStatus] = Query(None, description="Filter by task status"),
    priority: Optional[TaskPriority] = Query(None, description="Filter by priority class"),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Tasks per page"
    ),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    cache: ResponseCache = Depends(get_cache),
) -> TaskListResponse:
    """
    List the caller's tasks, newest first.

    Two queries: one COUNT for the pagination block, one page of rows.
    """
    key = _cache_key(cache, request, user)
    cached = await cache.get(key)
    if cached is not None:
        return TaskListResponse.model_validate(cached)

    conditions = [Task.user_id == user.id]
    if status:
        conditions.append(Task.status == status.value)
    if priority:
        conditions.append(Task.priority == priority.value)

    total = (await db.execute(select(func.count(Task.id)).where(*conditions))).scalar() or 0

    offset = (page - 1) * limit
    query = (
        select(Task)
        .where(*conditions)
        .order_by(Task.created_at.desc())
        .offset(offset)
        .limit(limit)
    )
    tasks = (await db.execute(query)).scalars().all()

    response = TaskListResponse(
        tasks=[TaskResponse.model_validate(t) for t in tasks],
        pagination=Pagination(
            total=total, page=page, pages=math.ceil(total / limit), limit=limit
        ),
    )
    await cache.set(key, response.model_dump(mode="json"))
    return response


@router.get("/scheduled", response_model=ScheduledTasksResponse)
async def get_scheduled_tasks(
    request: Request,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    cache: ResponseCache = Depends(get_cache),
) -> ScheduledTasksResponse:
    """
    The caller's PENDING tasks in the order they should be worked on.

    high before medium before low; inside a class, by age (see scheduler/scoring.py).
    """
    key = _cache_key(cache, request, user)
    cached = await cache.get(key)
    if cached is not None:
        return ScheduledTasksResponse.model_validate(cached)

    result = await db.execute(
        select(Task).where(Task.user_id == user.id, Task.status == TaskStatus.PENDING.value)
    )
    pending = result.scalars().all()

    scheduled = schedule(pending)
    logger.info(f"Scheduled {scheduled.count} pending tasks for user {user.id}")

    response = ScheduledTasksResponse(
        scheduled_tasks=[TaskResponse.model_validate(t) for t in scheduled.tasks],
        count=scheduled.count,
    )
    await cache.set(key, response.model_dump(mode="json"))
    return response


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    request: Request,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    cache: ResponseCache = Depends(get_cache),
) -> TaskResponse:
    key = _cache_key(cache, request, user)
    cached = await cache.get(key)
    if cached is not None:
        return TaskResponse.model_validate(cached)

    task = await _get_owned_task(task_id, user, db)
    response = TaskResponse.model_validate(task)
    await cache.set(key, response.model_dump(mode="json"))
    return response


@router.put("/{task_id}", response_model=TaskMessageResponse)
async def update_task(
    task_id: str,
    task_in: TaskUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    cache: ResponseCache = Depends(get_cache),
) -> TaskMessageResponse:
    """
    Partial update. Fields left out of the body are not touched.

    description may be explicitly set to null to clear it; title, priority
    and status cannot be nulled.
    """
    task = await _get_owned_task(task_id, user, db)

    changes = task_in.model_dump(exclude_unset=True)
    for field, value in changes.items():
        if value is None and field != "description":
            continue
        if isinstance(value, (TaskPriority, TaskStatus)):
            value = value.value
        setattr(task, field, value)

    await db.commit()
    await db.refresh(task)

    await cache.invalidate(CacheInvalidation(user_id=str(user.id), reason="task updated"))
    return TaskMessageResponse(
        message="Task updated successfully", task=TaskResponse.model_validate(task)
    )


@router.delete("/{task_id}")
async def delete_task(
    task_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    cache: ResponseCache = Depends(get_cache),
) -> dict:
    task = await _get_owned_task(task_id, user, db)
    await db.delete(task)
    await db.commit()

    await cache.invalidate(CacheInvalidation(user_id=str(user.id), reason="task deleted"))
    return {"message": "Task deleted successfully"}
