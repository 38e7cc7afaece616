import logging

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    Conflict,
    IdentityProviderError,
    InternalError,
    NotFound,
    Unauthenticated,
    translate_provider_error,
)
from app.core.hashing import Hasher
from app.core.identity import IdentityProvider, LocalIdentityProvider
from app.core.security import CurrentUser, create_access_token
from app.db.models.user import User
from app.db.repositories.user import UserRepository
from app.db.session import get_db
from . import schemas

logger = logging.getLogger(__name__)

EMAIL_EXISTS = "An account with this email already exists"
INVALID_CREDENTIALS = "Invalid email or password"


def _auth_payload(user: User) -> dict:
    token = create_access_token({"id": user.id, "email": user.email})
    return {"token": token, "user": user}


class AuthService:
    def __init__(self, db: Session, identity: IdentityProvider):
        self.db = db
        self.identity = identity
        self.users = UserRepository(db)

    def signup(self, payload: schemas.UserCreate) -> dict:
        if self.users.get_by_email(payload.email):
            raise Conflict(EMAIL_EXISTS)

        try:
            uid = self.identity.create_user(payload.email, payload.password, payload.full_name)
        except IdentityProviderError as e:
            logger.warning("Identity provider rejected signup: %s", e.code)
            raise translate_provider_error(e) from e

        user = User(
            id=uid,
            email=payload.email,
            full_name=payload.full_name,
            hashed_password=Hasher.hash_password(payload.password),
        )
        try:
            user = self.users.add(user)
        except IntegrityError as e:
            # lost a race with a concurrent signup for the same email
            raise Conflict(EMAIL_EXISTS) from e

        logger.info("User %s registered", user.id)
        return _auth_payload(user)

    def signin(self, payload: schemas.UserLogin) -> dict:
        user = self.users.get_by_email(payload.email)
        if not user or not Hasher.verify_password(payload.password, user.hashed_password):
            logger.warning("Failed sign-in attempt")
            raise Unauthenticated(INVALID_CREDENTIALS)

        try:
            self.identity.get_user(user.id)
        except IdentityProviderError as e:
            logger.error("Identity account lookup failed for user %s: %s", user.id, e.code)
            raise InternalError("User authentication error") from e

        return _auth_payload(user)

    def me(self, current_user: CurrentUser) -> User:
        user = self.users.get(current_user.id)
        if user is None:
            raise NotFound("User not found")
        return user


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db, LocalIdentityProvider(db))
