# tests/helpers.py

import uuid
from typing import Dict

from app.models.user import User
from app.utils.security import create_access_token

DEFAULT_PASSWORD = "Secret123!"


def headers_for(user: User) -> Dict[str, str]:
    token = create_access_token(user.id, user.username, user.role)
    return {"Authorization": f"Bearer {token}"}


def random_id() -> uuid.UUID:
    return uuid.uuid4()
