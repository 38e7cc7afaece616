from datetime import datetime
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import Field, field_serializer, field_validator

from app.api.schemas import CamelModel, check_text
from app.core.dates import to_iso
from app.core.identity import MIN_PASSWORD_LENGTH


def normalize_email(value) -> str:
    email = check_text(value, "Email", required=True).strip().lower()
    if not email:
        raise ValueError("Email is required")
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError("Invalid email address") from None
    return email


class UserCreate(CamelModel):
    full_name: Optional[str] = Field(default=None, validate_default=True)
    email: Optional[str] = Field(default=None, validate_default=True)
    password: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("full_name", mode="before")
    @classmethod
    def _full_name(cls, value):
        return check_text(value, "Full name", required=True, min_length=2, max_length=100)

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value):
        return normalize_email(value)

    @field_validator("password", mode="before")
    @classmethod
    def _password(cls, value):
        return check_text(value, "Password", required=True, min_length=MIN_PASSWORD_LENGTH)


class UserLogin(CamelModel):
    email: Optional[str] = Field(default=None, validate_default=True)
    password: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value):
        return normalize_email(value)

    @field_validator("password", mode="before")
    @classmethod
    def _password(cls, value):
        return check_text(value, "Password", required=True)


class UserOut(CamelModel):
    id: str
    email: str
    full_name: str
    created_at: datetime

    @field_serializer("created_at")
    def _iso(self, value: datetime) -> str:
        return to_iso(value)


class AuthOut(CamelModel):
    token: str
    user: UserOut
