# app/services/seed.py
"""
Sample accounts and tasks for a fresh database
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import List

from sqlalchemy.orm import Session

from app.models.task import Task, TaskPriority, TaskStatus
from app.models.user import Role, User
from app.repositories.task_repository import TaskRepository
from app.repositories.user_repository import UserRepository
from app.utils.security import hash_password

logger = logging.getLogger(__name__)

DEFAULT_USERS = [
    # username, email, password, role, days ago
    ("admin", "admin@example.com", "Admin123!", Role.ADMIN, 30),
    ("user", "user@example.com", "User123!", Role.USER, 25),
]

# id, title, description, status, priority, assignee ("admin"/"user"/None), creator, created days ago, updated days ago
SAMPLE_TASKS = [
    ("33333333-3333-3333-3333-333333333333", "Setup Development Environment",
     "Configure the development environment with all necessary tools and dependencies",
     TaskStatus.COMPLETED, TaskPriority.HIGH, "admin", "admin", 20, 15),
    ("44444444-4444-4444-4444-444444444444", "Implement User Authentication",
     "Create JWT-based authentication system with login and registration endpoints",
     TaskStatus.COMPLETED, TaskPriority.HIGH, "admin", "admin", 18, 12),
    ("55555555-5555-5555-5555-555555555555", "Design Database Schema",
     "Create SQLAlchemy models for the task management system",
     TaskStatus.IN_PROGRESS, TaskPriority.MEDIUM, "user", "admin", 15, 5),
    ("66666666-6666-6666-6666-666666666666", "Create Task CRUD Operations",
     "Implement Create, Read, Update, Delete operations for task management",
     TaskStatus.IN_PROGRESS, TaskPriority.HIGH, "user", "admin", 12, 3),
    ("77777777-7777-7777-7777-777777777777", "Add Task Validation",
     "Validate task creation and update requests",
     TaskStatus.COMPLETED, TaskPriority.MEDIUM, "admin", "admin", 10, 2),
    ("88888888-8888-8888-8888-888888888888", "Implement Task Filtering",
     "Add filtering capabilities by status, priority, and assignee",
     TaskStatus.COMPLETED, TaskPriority.MEDIUM, "user", "admin", 8, 8),
    ("99999999-9999-9999-9999-999999999999", "Add Task Comments Feature",
     "Allow users to add comments to tasks for better collaboration",
     TaskStatus.PENDING, TaskPriority.LOW, None, "admin", 6, 6),
    ("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa", "Create API Documentation",
     "Generate comprehensive API documentation using OpenAPI",
     TaskStatus.IN_PROGRESS, TaskPriority.MEDIUM, "admin", "admin", 4, 1),
    ("bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbbb", "Implement Email Notifications",
     "Send email notifications when tasks are assigned or status changes",
     TaskStatus.PENDING, TaskPriority.LOW, "user", "admin", 3, 3),
    ("cccccccc-cccc-cccc-cccc-cccccccccccc", "Add Task Attachments",
     "Allow users to attach files to tasks for better context and documentation",
     TaskStatus.PENDING, TaskPriority.LOW, None, "user", 1, 1),
]


def seed_users(db: Session) -> List[User]:
    """Insert the default accounts; returns an empty list if any user already exists"""
    repo = UserRepository(db)
    if repo.count():
        return []

    now = datetime.utcnow()
    users = [
        User(
            username=username,
            email=email,
            password_hash=hash_password(password),
            role=role,
            created_at=now - timedelta(days=days_ago),
        )
        for username, email, password, role, days_ago in DEFAULT_USERS
    ]
    repo.add_all(users)
    repo.save()
    logger.info("Seeded %d default users", len(users))
    return users


def seed_tasks(db: Session, users: List[User]) -> int:
    repo = TaskRepository(db)
    if repo.count():
        return 0

    admin = next((u for u in users if u.role == Role.ADMIN), None)
    regular = next((u for u in users if u.role == Role.USER), None)
    if admin is None or regular is None:
        logger.info("Skipping task seed: need one ADMIN and one USER account")
        return 0

    by_name = {"admin": admin.id, "user": regular.id}
    now = datetime.utcnow()
    tasks = [
        Task(
            id=uuid.UUID(task_id),
            title=title,
            description=description,
            status=status,
            priority=priority,
            assignee_id=by_name.get(assignee) if assignee else None,
            creator_id=by_name[creator],
            created_at=now - timedelta(days=created),
            updated_at=now - timedelta(days=updated),
        )
        for task_id, title, description, status, priority, assignee, creator, created, updated in SAMPLE_TASKS
    ]
    repo.add_all(tasks)
    repo.save()
    logger.info("Seeded %d sample tasks", len(tasks))
    return len(tasks)


def seed_database(db: Session) -> None:
    """Seed a fresh database.

    Sample tasks are only inserted alongside the default accounts, so an
    emptied task table is not refilled on the next startup.
    """
    users = seed_users(db)
    if not users:
        logger.info("Users already present, skipping seed")
        return
    seed_tasks(db, users)
