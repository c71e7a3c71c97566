# app/services/task_service.py
"""
Task lifecycle: validation, creation, full-replace updates and deletion
"""

import logging
import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.task import Task, TaskPriority, TaskStatus
from app.repositories.task_repository import TaskRepository
from app.schemas.task import TaskCreate, TaskUpdate
from app.utils.errors import NotFoundError, ValidationError
from app.utils.validators import parse_enum, validate_task_create, validate_task_update

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task records.

    Status changes are not restricted to a transition graph: an update may
    move a task from any status to any other status.
    """

    def __init__(self, db: Session):
        self.repo = TaskRepository(db)

    def list_tasks(self, status: Optional[TaskStatus] = None,
                   assignee_id: Optional[uuid.UUID] = None) -> List[Task]:
        return self.repo.find(status=status, assignee_id=assignee_id)

    def get_task(self, task_id: uuid.UUID) -> Optional[Task]:
        return self.repo.get_by_id(task_id)

    def create_task(self, data: TaskCreate, creator_id: uuid.UUID) -> Task:
        errors = validate_task_create(data.title, data.description, data.priority, data.assignee_id)
        if errors:
            raise ValidationError(errors)

        now = datetime.utcnow()
        task = Task(
            title=data.title,
            description=data.description,
            status=TaskStatus.PENDING,
            priority=parse_enum(TaskPriority, data.priority),
            assignee_id=data.assignee_id,
            creator_id=creator_id,
            created_at=now,
            updated_at=now,
        )
        self.repo.add(task)
        self.repo.save()
        self.repo.refresh(task)

        logger.info("Task %s created by %s (assignee %s)", task.id, creator_id, task.assignee_id)
        return task

    @staticmethod
    def validate_update(data: TaskUpdate) -> None:
        errors = validate_task_update(data.title, data.description, data.status, data.priority)
        if errors:
            raise ValidationError(errors)

    def update_task(self, task_id: uuid.UUID, data: TaskUpdate) -> Task:
        self.validate_update(data)

        task = self.repo.get_by_id(task_id)
        if task is None:
            raise NotFoundError("Task not found")
        return self.apply_update(task, data)

    def apply_update(self, task: Task, data: TaskUpdate) -> Task:
        """Overwrite every mutable field of an already validated and loaded task"""
        old_status = task.status
        task.title = data.title
        task.description = data.description
        task.status = parse_enum(TaskStatus, data.status)
        task.priority = parse_enum(TaskPriority, data.priority)
        task.assignee_id = data.assignee_id
        task.updated_at = datetime.utcnow()

        self.repo.save()
        self.repo.refresh(task)

        if old_status != task.status:
            logger.info("Task %s status %s -> %s", task.id, old_status.value, task.status.value)
        else:
            logger.info("Task %s updated", task.id)
        return task

    def delete_task(self, task_id: uuid.UUID) -> bool:
        task = self.repo.get_by_id(task_id)
        if task is None:
            return False

        self.repo.delete(task)
        self.repo.save()
        logger.info("Task %s deleted", task_id)
        return True
