# app/core/identity.py
"""
Credential store.

The identity provider issues user ids and owns the sign-in account. The
rest of the app only talks to it through ``IdentityProvider`` so a hosted
provider can replace the local one; failures come back as
``IdentityProviderError`` codes which ``app.core.exceptions`` translates.
"""
import logging
from typing import Optional, Protocol

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import IdentityProviderError
from app.db.models.identity import IdentityAccount
from app.db.models.user import new_id

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class IdentityProvider(Protocol):
    def create_user(self, email: str, password: str, display_name: Optional[str] = None) -> str:
        ...

    def get_user(self, uid: str) -> IdentityAccount:
        ...


class LocalIdentityProvider:
    """Identity accounts kept in the app database.

    Writes are flushed, not committed: the caller's unit of work decides.
    """

    def __init__(self, db: Session):
        self.db = db

    def create_user(self, email: str, password: str, display_name: Optional[str] = None) -> str:
        try:
            validate_email(email or "", check_deliverability=False)
        except EmailNotValidError as e:
            raise IdentityProviderError("auth/invalid-email", email) from e
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise IdentityProviderError("auth/weak-password")

        existing = self.db.query(IdentityAccount).filter(IdentityAccount.email == email).first()
        if existing:
            raise IdentityProviderError("auth/email-already-exists", email)

        account = IdentityAccount(uid=new_id(), email=email, display_name=display_name)
        self.db.add(account)
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise IdentityProviderError("auth/email-already-exists", email) from e

        logger.info("Identity account created uid=%s", account.uid)
        return account.uid

    def get_user(self, uid: str) -> IdentityAccount:
        account = self.db.get(IdentityAccount, uid)
        if account is None or account.disabled:
            raise IdentityProviderError("auth/user-not-found", uid)
        return account
