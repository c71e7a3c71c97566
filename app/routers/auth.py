from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.tokens import AuthResponse
from app.schemas.user import UserLogin, UserRegister
from app.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=AuthResponse)
def register(user: UserRegister, db: Session = Depends(get_db)):
    return AuthService(db).register(user.username, user.email, user.password)


@router.post("/login", response_model=AuthResponse)
def login(user: UserLogin, db: Session = Depends(get_db)):
    # Unknown email and wrong password produce the same 401
    return AuthService(db).login(user.email, user.password)
