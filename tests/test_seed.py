# tests/test_seed.py

from app.models.task import Task
from app.models.user import Role, User
from app.services.auth_service import AuthService
from app.services.seed import SAMPLE_TASKS, seed_database


def test_seed_populates_empty_database_once(db) -> None:
    seed_database(db)
    seed_database(db)

    users = db.query(User).all()
    assert sorted(u.username for u in users) == ["admin", "user"]
    assert {u.role for u in users} == {Role.ADMIN, Role.USER}
    assert db.query(Task).count() == len(SAMPLE_TASKS)


def test_seeded_accounts_can_log_in(db) -> None:
    seed_database(db)
    response = AuthService(db).login("admin@example.com", "Admin123!")
    assert response.user.role == Role.ADMIN


def test_seed_keeps_existing_users(db, alice) -> None:
    seed_database(db)
    assert [u.username for u in db.query(User).all()] == ["alice"]
    # No ADMIN/USER pair to own the samples
    assert db.query(Task).count() == 0


def test_emptied_task_table_is_not_refilled(db) -> None:
    seed_database(db)
    db.query(Task).delete()
    db.commit()

    seed_database(db)

    assert db.query(Task).count() == 0
    assert db.query(User).count() == 2
