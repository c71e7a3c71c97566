# app/schemas/task.py
from datetime import datetime
from typing import Optional
from uuid import UUID

from app.models.task import TaskPriority, TaskStatus
from app.schemas.base import CamelModel


# Status and priority arrive as raw tokens so that an unknown value is
# reported by the task validators alongside every other field error.
class TaskCreate(CamelModel):
    title: str = ""
    description: str = ""
    priority: str = TaskPriority.MEDIUM.value
    assignee_id: Optional[UUID] = None


class TaskUpdate(CamelModel):
    title: str = ""
    description: str = ""
    status: str = TaskStatus.PENDING.value
    priority: str = TaskPriority.MEDIUM.value
    assignee_id: Optional[UUID] = None


class TaskOut(CamelModel):
    id: UUID
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    assignee_id: Optional[UUID] = None
    creator_id: UUID
    created_at: datetime
    updated_at: datetime
