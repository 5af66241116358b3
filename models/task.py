"""
Task ORM model: maps to the "tasks" table.

Key design decisions:
- UUID primary key: no sequential IDs to guess across users
- Portable Uuid type: same model runs on PostgreSQL and on SQLite in tests
- priority/status stored as plain strings holding TaskPriority/TaskStatus values
- created_at is set in Python (not server_default) so it keeps sub-second
  precision on every backend; the scheduler's age tiebreak depends on it
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base
from models.enums import TaskPriority, TaskStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    __tablename__ = "tasks"

    # ── Identity ────────────────────────────────────────────────
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # ── Content ─────────────────────────────────────────────────
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # ── Scheduling fields ───────────────────────────────────────
    priority: Mapped[str] = mapped_column(
        String(10), default=TaskPriority.MEDIUM.value, nullable=False
    )
    status: Mapped[str] = mapped_column(
        String(10), default=TaskStatus.PENDING.value, nullable=False, index=True
    )

    # ── Timestamps ──────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Task {self.id} [{self.priority}] {self.status}>"
