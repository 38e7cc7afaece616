import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Header, Request
from jose import JWTError, jwt
from pydantic import BaseModel

from app.config import settings
from app.core.dates import utcnow
from app.core.exceptions import InvalidToken, Unauthenticated

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class CurrentUser(BaseModel):
    """Identity carried by a session token."""

    id: str
    email: str


# 🔐 Create JWT Access Token
def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    now: Optional[datetime] = None,
) -> str:
    issued_at = now or utcnow()
    expire = issued_at + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "id": data["id"],
        "email": data["email"],
        "iat": int(issued_at.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_access_token(token: str) -> CurrentUser:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning("JWT decode failed: %s", str(e))
        raise InvalidToken() from e

    user_id = payload.get("id")
    email = payload.get("email")
    if not user_id or not email:
        logger.warning("JWT token missing 'id' or 'email' claim")
        raise InvalidToken()

    return CurrentUser(id=str(user_id), email=str(email))


def extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise Unauthenticated("Authorization header is required")
    if not authorization.startswith(BEARER_PREFIX):
        raise Unauthenticated("Invalid authorization header")
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise Unauthenticated("Invalid authorization header")
    return token


# 👤 Extract User from Token
def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> CurrentUser:
    """Authorization gate for protected routes.

    Only identity is resolved here; whether the caller may touch a
    resource is decided by the resource services.
    """
    token = extract_bearer_token(authorization)
    user = verify_access_token(token)
    request.state.user = user
    return user
