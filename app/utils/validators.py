# app/utils/validators.py
import re
from enum import Enum
from typing import List, Optional, Type, TypeVar

from email_validator import EmailNotValidError, validate_email

from app.models.task import TaskPriority, TaskStatus
from app.utils.errors import FieldError

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 6

USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_]+")

E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: Type[E], token: Optional[str]) -> Optional[E]:
    """Parse an enum token case-insensitively; None if it is not a member"""
    if not token or not isinstance(token, str):
        return None
    try:
        return enum_cls(token.strip().upper())
    except ValueError:
        return None


def _allowed(enum_cls: Type[Enum]) -> str:
    return ", ".join(member.value for member in enum_cls)


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _check_title_and_description(title, description) -> List[FieldError]:
    errors = []
    if _is_blank(title):
        errors.append(FieldError("title", "Title is required"))
    elif len(title) > TITLE_MAX_LENGTH:
        errors.append(FieldError("title", f"Title cannot exceed {TITLE_MAX_LENGTH} characters"))

    if _is_blank(description):
        errors.append(FieldError("description", "Description is required"))
    elif len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(FieldError("description", f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"))
    return errors


def _check_priority(priority) -> List[FieldError]:
    if _is_blank(priority):
        return [FieldError("priority", "Priority is required")]
    if parse_enum(TaskPriority, priority) is None:
        return [FieldError("priority", f"Priority must be one of: {_allowed(TaskPriority)}")]
    return []


def validate_task_create(title, description, priority, assignee_id) -> List[FieldError]:
    errors = _check_title_and_description(title, description)
    errors.extend(_check_priority(priority))
    if _is_blank(assignee_id):
        errors.append(FieldError("assigneeId", "Assignee is required"))
    return errors


def validate_task_update(title, description, status, priority) -> List[FieldError]:
    errors = _check_title_and_description(title, description)
    if _is_blank(status):
        errors.append(FieldError("status", "Status is required"))
    elif parse_enum(TaskStatus, status) is None:
        errors.append(FieldError("status", f"Status must be one of: {_allowed(TaskStatus)}"))
    errors.extend(_check_priority(priority))
    return errors


def validate_registration(username, email, password) -> List[FieldError]:
    errors = []
    if _is_blank(username):
        errors.append(FieldError("username", "Username is required"))
    else:
        if not USERNAME_PATTERN.fullmatch(username):
            errors.append(FieldError("username", "Username can only contain letters, numbers, and underscores"))
        if len(username) < USERNAME_MIN_LENGTH:
            errors.append(FieldError("username", f"Username must be at least {USERNAME_MIN_LENGTH} characters long"))
        if len(username) > USERNAME_MAX_LENGTH:
            errors.append(FieldError("username", f"Username cannot exceed {USERNAME_MAX_LENGTH} characters"))

    if _is_blank(email):
        errors.append(FieldError("email", "Email is required"))
    elif not _is_valid_email(email):
        errors.append(FieldError("email", "Email is not a valid email address"))

    if _is_blank(password):
        errors.append(FieldError("password", "Password is required."))
        return errors
    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(FieldError("password", f"Password must be at least {PASSWORD_MIN_LENGTH} characters"))
    if not re.search(r"[A-Z]", password):
        errors.append(FieldError("password", "Password must contain at least one uppercase letter"))
    if not re.search(r"[a-z]", password):
        errors.append(FieldError("password", "Password must contain at least one lowercase letter"))
    if not re.search(r"[0-9]", password):
        errors.append(FieldError("password", "Password must contain at least one number"))
    if not re.search(r"[^a-zA-Z0-9]", password):
        errors.append(FieldError("password", "Password must contain at least one special character"))
    return errors


def validate_login(email, password) -> List[FieldError]:
    errors = []
    if _is_blank(email):
        errors.append(FieldError("email", "Email is required"))
    elif not _is_valid_email(email):
        errors.append(FieldError("email", "Email is not a valid email address"))

    if _is_blank(password):
        errors.append(FieldError("password", "Password is required."))
    elif len(password) < PASSWORD_MIN_LENGTH:
        errors.append(FieldError("password", f"Password must be at least {PASSWORD_MIN_LENGTH} characters"))
    return errors
