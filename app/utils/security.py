# app/utils/security.py
import base64
import hashlib
import hmac
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from app.config.settings import Settings
from app.models.user import Role
from app.utils.errors import AuthenticationError
from app.utils.policy import Actor

logger = logging.getLogger(__name__)

# Claim names carried by access tokens
CLAIM_USER_ID = "sub"
CLAIM_USERNAME = "name"
CLAIM_ROLE = "role"


def hash_password(password: str) -> str:
    """One-way SHA-512 digest of the password, base64 encoded.

    The digest is unsalted so existing credential rows stay verifiable.
    """
    digest = hashlib.sha512(password.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    return hmac.compare_digest(hash_password(password), password_hash or "")


def create_access_token(user_id: uuid.UUID, username: str, role: Role,
                        expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=Settings.JWT['expire_minutes']))
    claims = {
        CLAIM_USER_ID: str(user_id),
        CLAIM_USERNAME: username,
        CLAIM_ROLE: Role(role).value,
        "iss": Settings.JWT['issuer'],
        "aud": Settings.JWT['audience'],
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(claims, Settings.jwt_secret(), algorithm=Settings.JWT['algorithm'])


def decode_access_token(token: str) -> Dict[str, Any]:
    """Validate signature, issuer, audience and expiry; return the claims"""
    try:
        return jwt.decode(
            token,
            Settings.jwt_secret(),
            algorithms=[Settings.JWT['algorithm']],
            audience=Settings.JWT['audience'],
            issuer=Settings.JWT['issuer'],
            options={"require_exp": True, "require_iss": True, "require_aud": True, "leeway": 0},
        )
    except ExpiredSignatureError:
        logger.warning("Rejected expired access token")
        raise AuthenticationError("Token expired", headers={"Token-Expired": "true"})
    except JWTError as e:
        logger.warning("Rejected access token: %s", e)
        raise AuthenticationError("Invalid token")


def actor_from_claims(claims: Dict[str, Any]) -> Actor:
    """Build the request actor, failing closed on missing or unknown claims"""
    raw_id = claims.get(CLAIM_USER_ID)
    raw_role = claims.get(CLAIM_ROLE)
    if not raw_id or not raw_role:
        raise AuthenticationError("Token is missing required claims")
    try:
        user_id = uuid.UUID(str(raw_id))
    except ValueError:
        raise AuthenticationError("Token carries a malformed user id")
    try:
        role = Role(raw_role)
    except ValueError:
        raise AuthenticationError("Token carries an unknown role")
    return Actor(user_id=user_id, role=role, username=claims.get(CLAIM_USERNAME))
