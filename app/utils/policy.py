# app/utils/policy.py
"""Role-scoped authorization decisions for tasks and user profiles.

Every function here is a pure decision over the request actor and, where
relevant, the resource being touched. Routers call them after loading the
resource so that a missing id is reported as 404 before any 403.

Note the asymmetry between tasks an actor may *see* and tasks an actor may
*change*: USER visibility is by assignee, USER modification is by creator.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from app.models.task import Task
from app.models.user import Role, User
from app.utils.errors import AuthenticationError, AuthorizationError


@dataclass(frozen=True)
class Actor:
    """The authenticated identity performing a request"""
    user_id: uuid.UUID
    role: Role
    username: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


def _require_actor(actor: Optional[Actor]) -> Actor:
    if actor is None or actor.user_id is None or actor.role is None:
        raise AuthenticationError("Missing actor identity")
    if not isinstance(actor.role, Role):
        raise AuthenticationError("Unknown role")
    return actor


def task_list_scope(actor: Actor, requested_assignee: Optional[uuid.UUID] = None) -> Optional[uuid.UUID]:
    """Return the assignee filter an actor's task listing is restricted to.

    ADMIN filters are honored verbatim (``None`` means every task). A USER is
    always narrowed to their own tasks, whatever filter was requested.
    """
    actor = _require_actor(actor)
    if actor.role is Role.ADMIN:
        return requested_assignee
    if actor.role is Role.USER:
        return actor.user_id
    raise AuthenticationError("Unknown role")


def can_view_task(actor: Actor, task: Task) -> bool:
    actor = _require_actor(actor)
    if actor.role is Role.ADMIN:
        return True
    if actor.role is Role.USER:
        return task.assignee_id is not None and task.assignee_id == actor.user_id
    return False


def can_create_task(actor: Actor) -> bool:
    actor = _require_actor(actor)
    return actor.role in (Role.ADMIN, Role.USER)


def can_update_task(actor: Actor, task: Task) -> bool:
    actor = _require_actor(actor)
    if actor.role is Role.ADMIN:
        return True
    if actor.role is Role.USER:
        return task.creator_id == actor.user_id
    return False


def can_delete_task(actor: Actor) -> bool:
    actor = _require_actor(actor)
    return actor.role is Role.ADMIN


def user_list_scope(actor: Actor, requested_user_id: Optional[uuid.UUID] = None) -> Optional[uuid.UUID]:
    """Return the single user id a listing is narrowed to, or ``None`` for all users"""
    actor = _require_actor(actor)
    if actor.role is Role.ADMIN:
        return requested_user_id
    if actor.role is Role.USER:
        return actor.user_id
    raise AuthenticationError("Unknown role")


def can_view_user(actor: Actor, target: User) -> bool:
    actor = _require_actor(actor)
    if actor.role is Role.ADMIN:
        return True
    return target.id == actor.user_id


def ensure(permitted: bool, reason: str) -> None:
    """Raise AuthorizationError with ``reason`` unless ``permitted``"""
    if not permitted:
        raise AuthorizationError(reason)
