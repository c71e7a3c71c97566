# tests/test_api_errors.py

import pytest
from fastapi.testclient import TestClient

from app.config.settings import Settings
from app.services.task_service import TaskService
from main import app

from .helpers import headers_for


@pytest.fixture()
def failing_client(client, monkeypatch) -> TestClient:
    def explode(self, *args, **kwargs):
        raise RuntimeError("connection to db-internal:5432 refused")

    monkeypatch.setattr(TaskService, "list_tasks", explode)
    return TestClient(app, raise_server_exceptions=False)


def test_unexpected_error_returns_generic_500(failing_client, monkeypatch, admin) -> None:
    monkeypatch.setattr(Settings, "DEBUG", False)

    response = failing_client.get("/api/tasks", headers=headers_for(admin))

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert "db-internal" not in response.text


def test_unexpected_error_message_is_shown_in_debug(failing_client, monkeypatch, admin) -> None:
    monkeypatch.setattr(Settings, "DEBUG", True)

    response = failing_client.get("/api/tasks", headers=headers_for(admin))

    assert response.status_code == 500
    assert response.json() == {"message": "connection to db-internal:5432 refused"}
