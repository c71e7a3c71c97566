# app/repositories/user_repository.py
from typing import Optional

from sqlalchemy import func, or_

from app.models.user import User
from app.repositories.base import Repository


class UserRepository(Repository[User]):
    model = User

    def find_by_email(self, email: str) -> Optional[User]:
        return self.first(User.email == email)

    def username_or_email_taken(self, username: str, email: str) -> bool:
        """True if the email is registered or the username exists in any letter case"""
        return self.exists(
            or_(
                User.email == email,
                func.lower(User.username) == username.lower(),
            )
        )
