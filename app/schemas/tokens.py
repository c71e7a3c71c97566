# app/schemas/tokens.py
from app.schemas.base import CamelModel
from app.schemas.user import UserOut


class AuthResponse(CamelModel):
    token: str
    user: UserOut
