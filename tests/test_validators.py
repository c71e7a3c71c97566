# tests/test_validators.py

import pytest

from app.utils.validators import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    validate_registration,
    validate_task_create,
    validate_task_update,
)

ASSIGNEE = "8f0c2a4e-8f2b-4a33-9b1e-0e7c5f9f6d11"


def _username_errors(username):
    return [e for e in validate_registration(username, "eve@example.com", "Passw0rd!") if e.field == "username"]


@pytest.mark.parametrize("username", ["eve\n", "eve\r\n", "ev e", "eve!", "\neve"])
def test_username_rejects_characters_outside_the_allowed_set(username) -> None:
    assert _username_errors(username)


@pytest.mark.parametrize("username", [
    "a" * USERNAME_MIN_LENGTH,
    "a" * USERNAME_MAX_LENGTH,
    "Mixed_Case_99",
])
def test_username_bounds_accepted(username) -> None:
    assert _username_errors(username) == []


@pytest.mark.parametrize("username", ["a" * (USERNAME_MIN_LENGTH - 1), "a" * (USERNAME_MAX_LENGTH + 1)])
def test_username_bounds_rejected(username) -> None:
    assert len(_username_errors(username)) == 1


def test_title_and_description_at_their_limits_are_accepted() -> None:
    title = "t" * TITLE_MAX_LENGTH
    description = "d" * DESCRIPTION_MAX_LENGTH
    assert validate_task_create(title, description, "LOW", ASSIGNEE) == []
    assert validate_task_update(title, description, "PENDING", "LOW") == []


def test_title_and_description_over_their_limits_are_rejected() -> None:
    title = "t" * (TITLE_MAX_LENGTH + 1)
    description = "d" * (DESCRIPTION_MAX_LENGTH + 1)
    create_fields = [e.field for e in validate_task_create(title, description, "LOW", ASSIGNEE)]
    update_fields = [e.field for e in validate_task_update(title, description, "PENDING", "LOW")]
    assert create_fields == ["title", "description"]
    assert update_fields == ["title", "description"]
