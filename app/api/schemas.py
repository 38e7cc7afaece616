from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data: Optional[T] = None


def check_text(
    value,
    label: str,
    *,
    required: bool = False,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> str:
    """Shared string rule for payload validators; raises ValueError with a client-facing message."""
    if value is None or (required and value == ""):
        if required:
            raise ValueError(f"{label} is required")
        raise ValueError(f"{label} must be a string")
    if not isinstance(value, str):
        raise ValueError(f"{label} must be a string")
    if min_length is not None and len(value) < min_length:
        raise ValueError(f"{label} must be at least {min_length} characters")
    if max_length is not None and len(value) > max_length:
        raise ValueError(f"{label} must be less than {max_length} characters")
    return value
