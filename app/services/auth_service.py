# app/services/auth_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.user import Role, User
from app.repositories.user_repository import UserRepository
from app.schemas.tokens import AuthResponse
from app.schemas.user import UserOut
from app.utils.errors import AuthenticationError, ConflictError, ValidationError
from app.utils.security import create_access_token, hash_password, verify_password
from app.utils.validators import validate_login, validate_registration

logger = logging.getLogger(__name__)

DUPLICATE_USER_MESSAGE = "Username or Email already registered."
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


class AuthService:
    def __init__(self, db: Session):
        self.repo = UserRepository(db)

    def register(self, username: str, email: str, password: str, role: Role = Role.USER) -> AuthResponse:
        errors = validate_registration(username, email, password)
        if errors:
            raise ValidationError(errors)

        if self.repo.username_or_email_taken(username, email):
            raise ConflictError(DUPLICATE_USER_MESSAGE)

        user = User(
            username=username,
            email=email,
            password_hash=hash_password(password),
            role=Role(role),
        )
        self.repo.add(user)
        try:
            self.repo.save()
        except IntegrityError:
            # Lost a race against a concurrent registration
            self.repo.rollback()
            raise ConflictError(DUPLICATE_USER_MESSAGE)
        self.repo.refresh(user)

        logger.info("Registered user %s (%s)", user.username, user.role.value)
        return self._auth_response(user)

    def login(self, email: str, password: str) -> AuthResponse:
        errors = validate_login(email, password)
        if errors:
            raise ValidationError(errors)

        user = self.repo.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt for %s", email)
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        return self._auth_response(user)

    @staticmethod
    def _auth_response(user: User) -> AuthResponse:
        token = create_access_token(user.id, user.username, user.role)
        return AuthResponse(token=token, user=UserOut.model_validate(user))
