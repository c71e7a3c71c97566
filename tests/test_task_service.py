# tests/test_task_service.py

import uuid

import pytest

from app.models.task import TaskPriority, TaskStatus
from app.schemas.task import TaskCreate, TaskUpdate
from app.services.task_service import TaskService
from app.utils.errors import NotFoundError, ValidationError


def _create(db, creator, assignee, **overrides):
    data = dict(title="Ship", description="Ship v1", priority="HIGH", assignee_id=assignee.id)
    data.update(overrides)
    return TaskService(db).create_task(TaskCreate(**data), creator_id=creator.id)


def test_create_then_get_round_trip(db, alice, bob) -> None:
    created = _create(db, alice, bob)
    fetched = TaskService(db).get_task(created.id)

    assert fetched is not None
    assert fetched.title == "Ship"
    assert fetched.description == "Ship v1"
    assert fetched.priority == TaskPriority.HIGH
    assert fetched.status == TaskStatus.PENDING
    assert fetched.assignee_id == bob.id
    assert fetched.creator_id == alice.id
    assert fetched.created_at is not None
    assert fetched.updated_at == fetched.created_at


def test_create_reports_every_violation(db, alice) -> None:
    with pytest.raises(ValidationError) as exc_info:
        TaskService(db).create_task(
            TaskCreate(title="", description=" ", priority="SOMEDAY", assignee_id=None),
            creator_id=alice.id,
        )
    assert set(exc_info.value.fields()) == {"title", "description", "priority", "assigneeId"}
    assert TaskService(db).list_tasks() == []


def test_create_rejects_overlong_title(db, alice, bob) -> None:
    with pytest.raises(ValidationError) as exc_info:
        _create(db, alice, bob, title="x" * 201)
    assert exc_info.value.fields() == ["title"]


def test_create_accepts_lower_case_priority(db, alice, bob) -> None:
    task = _create(db, alice, bob, priority="urgent")
    assert task.priority == TaskPriority.URGENT


def test_update_replaces_all_mutable_fields(db, alice, bob) -> None:
    task = _create(db, alice, bob)
    creator_id, created_at, first_updated = task.creator_id, task.created_at, task.updated_at

    updated = TaskService(db).update_task(task.id, TaskUpdate(
        title="Ship v2", description="Second release", status="IN_PROGRESS",
        priority="LOW", assignee_id=None,
    ))

    assert updated.title == "Ship v2"
    assert updated.description == "Second release"
    assert updated.status == TaskStatus.IN_PROGRESS
    assert updated.priority == TaskPriority.LOW
    assert updated.assignee_id is None
    assert updated.creator_id == creator_id
    assert updated.created_at == created_at
    assert updated.updated_at >= first_updated


def test_update_with_invalid_status_leaves_task_unchanged(db, alice, bob) -> None:
    task = _create(db, alice, bob)

    with pytest.raises(ValidationError) as exc_info:
        TaskService(db).update_task(task.id, TaskUpdate(
            title="Changed", description="Changed", status="DONE", priority="LOW", assignee_id=alice.id,
        ))
    assert exc_info.value.fields() == ["status"]

    db.expire_all()
    stored = TaskService(db).get_task(task.id)
    assert stored.title == "Ship"
    assert stored.status == TaskStatus.PENDING
    assert stored.priority == TaskPriority.HIGH
    assert stored.assignee_id == bob.id


def test_update_unknown_task_raises_not_found(db) -> None:
    with pytest.raises(NotFoundError):
        TaskService(db).update_task(uuid.uuid4(), TaskUpdate(
            title="a", description="b", status="PENDING", priority="LOW",
        ))


@pytest.mark.parametrize("start,target", [
    (TaskStatus.COMPLETED, TaskStatus.PENDING),
    (TaskStatus.CANCELLED, TaskStatus.IN_PROGRESS),
    (TaskStatus.PENDING, TaskStatus.COMPLETED),
])
def test_status_transitions_are_unrestricted(db, alice, make_task, start, target) -> None:
    task = make_task(alice, alice, status=start)
    updated = TaskService(db).update_task(task.id, TaskUpdate(
        title=task.title, description=task.description, status=target.value, priority="MEDIUM",
    ))
    assert updated.status == target


def test_delete(db, alice, bob) -> None:
    task = _create(db, alice, bob)
    service = TaskService(db)

    assert service.delete_task(task.id) is True
    assert service.get_task(task.id) is None
    assert service.delete_task(task.id) is False


def test_delete_unknown_id_returns_false(db) -> None:
    assert TaskService(db).delete_task(uuid.uuid4()) is False


def test_list_filters(db, alice, bob, make_task) -> None:
    t1 = make_task(alice, alice, title="a1", status=TaskStatus.PENDING)
    t2 = make_task(alice, bob, title="b1", status=TaskStatus.PENDING)
    t3 = make_task(alice, bob, title="b2", status=TaskStatus.COMPLETED)
    service = TaskService(db)

    assert {t.id for t in service.list_tasks()} == {t1.id, t2.id, t3.id}
    assert {t.id for t in service.list_tasks(status=TaskStatus.PENDING)} == {t1.id, t2.id}
    assert {t.id for t in service.list_tasks(assignee_id=bob.id)} == {t2.id, t3.id}
    assert {t.id for t in service.list_tasks(status=TaskStatus.COMPLETED, assignee_id=bob.id)} == {t3.id}
    assert service.list_tasks(status=TaskStatus.CANCELLED) == []
