# app/utils/auth.py
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.utils.errors import AuthenticationError
from app.utils.policy import Actor
from app.utils.security import actor_from_claims, decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Actor:
    """Resolve the authenticated actor from the Authorization: Bearer header"""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise AuthenticationError("Missing bearer token")

    claims = decode_access_token(credentials.credentials)
    return actor_from_claims(claims)
