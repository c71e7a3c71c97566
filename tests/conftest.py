# tests/conftest.py

import os

# Configure before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-with-enough-length-for-hs256"
os.environ["SEED_DATA"] = "false"

from typing import Callable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db, init_db
from app.models.task import Task, TaskPriority, TaskStatus
from app.models.user import Role, User
from app.utils.security import hash_password
from main import app

from .helpers import DEFAULT_PASSWORD


@pytest.fixture()
def engine():
    """Fresh in-memory database per test, shared across threads"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db(engine) -> Session:
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db: Session) -> TestClient:
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db: Session) -> Callable[..., User]:
    def _make(username: str, role: Role = Role.USER, email: str = None,
              password: str = DEFAULT_PASSWORD) -> User:
        user = User(
            username=username,
            email=email or f"{username}@example.com",
            password_hash=hash_password(password),
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture()
def make_task(db: Session) -> Callable[..., Task]:
    def _make(creator: User, assignee: User = None, title: str = "Write report",
              status: TaskStatus = TaskStatus.PENDING,
              priority: TaskPriority = TaskPriority.MEDIUM) -> Task:
        task = Task(
            title=title,
            description=f"{title} description",
            status=status,
            priority=priority,
            creator_id=creator.id,
            assignee_id=assignee.id if assignee else None,
        )
        db.add(task)
        db.commit()
        db.refresh(task)
        return task

    return _make


@pytest.fixture()
def admin(make_user) -> User:
    return make_user("admin", role=Role.ADMIN)


@pytest.fixture()
def alice(make_user) -> User:
    return make_user("alice")


@pytest.fixture()
def bob(make_user) -> User:
    return make_user("bob")
