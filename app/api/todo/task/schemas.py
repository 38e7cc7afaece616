from datetime import datetime
from typing import Optional

from pydantic import Field, field_serializer, field_validator

from app.api.schemas import CamelModel, check_text
from app.core.dates import parse_iso, to_iso
from app.db.models.todo.task import TaskStatus

TITLE_MIN, TITLE_MAX = 2, 200


def _check_title(value, required: bool):
    return check_text(value, "Task title", required=required, min_length=TITLE_MIN, max_length=TITLE_MAX)


def _check_status(value):
    try:
        return TaskStatus(value)
    except ValueError:
        raise ValueError("Invalid status") from None


def _check_due_date(value):
    # Empty string and null both mean "no due date"
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError("Due date must be an ISO-8601 date string")
    try:
        return parse_iso(value)
    except ValueError:
        raise ValueError("Due date must be an ISO-8601 date string") from None


class TaskCreate(CamelModel):
    title: Optional[str] = Field(default=None, validate_default=True)
    status: TaskStatus = TaskStatus.TODO
    due_date: Optional[datetime] = None         # 🗓 Due Date

    @field_validator("title", mode="before")
    @classmethod
    def _title(cls, value):
        return _check_title(value, required=True)

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, value):
        return _check_status(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def _due_date(cls, value):
        return _check_due_date(value)


class TaskUpdate(CamelModel):
    """Partial update. A field left out is untouched; ``dueDate: null`` clears the due date."""

    title: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None

    @field_validator("title", mode="before")
    @classmethod
    def _title(cls, value):
        return _check_title(value, required=False)

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, value):
        return _check_status(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def _due_date(cls, value):
        return _check_due_date(value)


class TaskOut(CamelModel):
    id: str
    project_id: str
    title: str
    status: TaskStatus
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @field_serializer("due_date", "created_at", "updated_at")
    def _iso(self, value: Optional[datetime]) -> Optional[str]:
        return to_iso(value)
