# app/routers/task.py
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.task import TaskStatus
from app.schemas.task import TaskCreate, TaskOut, TaskUpdate
from app.services.task_service import TaskService
from app.utils import policy
from app.utils.auth import get_current_actor
from app.utils.errors import FieldError, NotFoundError, ValidationError
from app.utils.policy import Actor
from app.utils.validators import parse_enum

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


def _load_task(service: TaskService, task_id: UUID):
    task = service.get_task(task_id)
    if task is None:
        raise NotFoundError("Task not found")
    return task


@router.get("", response_model=List[TaskOut])
def get_all_tasks(
    status: Optional[str] = None,
    assignee: Optional[UUID] = None,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
):
    """Get tasks with role-based scope

    - ADMIN: every task, optionally filtered by the assignee query parameter
    - USER: only tasks assigned to the caller; the assignee parameter is ignored
    """
    status_filter = None
    if status:
        status_filter = parse_enum(TaskStatus, status)
        if status_filter is None:
            raise ValidationError([FieldError("status", "Status must be one of: "
                                              + ", ".join(s.value for s in TaskStatus))])

    assignee_filter = policy.task_list_scope(actor, assignee)
    return TaskService(db).list_tasks(status=status_filter, assignee_id=assignee_filter)


@router.get("/{task_id}", response_model=TaskOut)
def get_task(
    task_id: UUID,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
):
    task = _load_task(TaskService(db), task_id)
    policy.ensure(policy.can_view_task(actor, task), "You can only view tasks assigned to you.")
    return task


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    response: Response,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
):
    """Create a task; the caller becomes its creator and may assign it to anyone"""
    policy.ensure(policy.can_create_task(actor), "You don't have permission to create tasks.")
    created = TaskService(db).create_task(task, creator_id=actor.user_id)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.put("/{task_id}", response_model=TaskOut)
def update_task(
    task_id: UUID,
    task_update: TaskUpdate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
):
    service = TaskService(db)
    service.validate_update(task_update)

    existing = _load_task(service, task_id)
    policy.ensure(policy.can_update_task(actor, existing), "You can only update tasks you created.")
    return service.apply_update(existing, task_update)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: UUID,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
):
    policy.ensure(policy.can_delete_task(actor), "Only administrators can delete tasks.")
    if not TaskService(db).delete_task(task_id):
        raise NotFoundError("Task not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
