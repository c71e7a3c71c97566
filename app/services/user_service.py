# app/services/user_service.py
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.user import User
from app.repositories.user_repository import UserRepository


class UserService:
    """Read-only user directory"""

    def __init__(self, db: Session):
        self.repo = UserRepository(db)

    def list_users(self) -> List[User]:
        return self.repo.list_all()

    def get_user(self, user_id: uuid.UUID) -> Optional[User]:
        return self.repo.get_by_id(user_id)
