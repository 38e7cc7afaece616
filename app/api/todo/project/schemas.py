from datetime import datetime
from typing import Optional

from pydantic import Field, field_serializer, field_validator

from app.api.schemas import CamelModel, check_text
from app.core.dates import to_iso

NAME_MIN, NAME_MAX = 2, 100
DESCRIPTION_MAX = 500


def _check_name(value, required: bool):
    return check_text(value, "Project name", required=required, min_length=NAME_MIN, max_length=NAME_MAX)


def _check_description(value, required: bool):
    return check_text(value, "Description", required=required, max_length=DESCRIPTION_MAX)


class ProjectCreate(CamelModel):
    name: Optional[str] = Field(default=None, validate_default=True)
    description: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value):
        return _check_name(value, required=True)

    @field_validator("description", mode="before")
    @classmethod
    def _description(cls, value):
        return _check_description(value, required=True)


class ProjectUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value):
        return _check_name(value, required=False)

    @field_validator("description", mode="before")
    @classmethod
    def _description(cls, value):
        return _check_description(value, required=False)


class ProjectOut(CamelModel):
    id: str
    user_id: str
    name: str
    description: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def _iso(self, value: datetime) -> str:
        return to_iso(value)
