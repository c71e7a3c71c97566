# app/routers/user.py
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.user import UserOut
from app.services.user_service import UserService
from app.utils import policy
from app.utils.auth import get_current_actor
from app.utils.errors import NotFoundError
from app.utils.policy import Actor

router = APIRouter()


@router.get("", response_model=List[UserOut])
def get_all_users(
    user_id: Optional[UUID] = Query(None, alias="userId"),
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
):
    """Get users - admins see everyone (or the one requested), users only themselves"""
    service = UserService(db)
    target_id = policy.user_list_scope(actor, user_id)

    if target_id is not None:
        user = service.get_user(target_id)
        if user is None:
            raise NotFoundError("User not found")
        return [user]

    return service.list_users()


@router.get("/{user_id}", response_model=UserOut)
def get_user(
    user_id: UUID,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
):
    """Get a specific user by ID"""
    user = UserService(db).get_user(user_id)
    if not user:
        raise NotFoundError("User not found")
    policy.ensure(policy.can_view_user(actor, user), "You can only view your own profile.")
    return user
