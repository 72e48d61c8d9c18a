"""Shared request/response schemas and field checks."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

DATA_IMAGE_PREFIX = "data:image/"
DIRECTION_MESSAGE = 'Direction must be "up" or "down"'


class Direction(str, Enum):
    """Single-step move direction."""

    UP = "up"
    DOWN = "down"


def require_integer(
    value: Any, message: str, low: int | None = None, high: int | None = None
) -> Any:
    """Reject booleans, strings, non-integral numbers and values outside ``low..high``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(message)
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(message)
    value = int(value)
    if (low is not None and value < low) or (high is not None and value > high):
        raise ValueError(message)
    return value


def require_data_image(value: str) -> str:
    """Require a base64 image data URI."""
    if not value.startswith(DATA_IMAGE_PREFIX):
        raise ValueError("Image must be a valid base64-encoded image (data:image/*;base64,...)")
    return value


class IdentifiedRequest(BaseModel):
    """Body carrying the ID of an existing row."""

    id: int = Field(..., gt=0)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: Any) -> Any:
        return require_integer(v, "ID must be an integer")


class DeleteRequest(IdentifiedRequest):
    """Schema for DELETE bodies."""


class MoveRequest(IdentifiedRequest):
    """Schema for PATCH (move) bodies."""

    direction: Direction

    @field_validator("direction", mode="before")
    @classmethod
    def validate_direction(cls, v: Any) -> Any:
        if v not in (Direction.UP.value, Direction.DOWN.value):
            raise ValueError(DIRECTION_MESSAGE)
        return v


class MessageResponse(BaseModel):
    """Schema for plain confirmation responses."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned by every collection handler."""

    error: str
    details: str | None = None


class PositionReport(BaseModel):
    """Density check result for one positioned collection."""

    collection: str
    count: int
    gaps: list[int] = []
    duplicates: list[int] = []

    @property
    def is_dense(self) -> bool:
        return not self.gaps and not self.duplicates


class PositionedResponse(BaseModel):
    """Base for responses of positioned collections."""

    position: int = 0

    @field_validator("position", mode="before")
    @classmethod
    def default_position(cls, v: Any) -> Any:
        return 0 if v is None else v


class ActionResult(BaseModel):
    """Outcome of a server-side admin action, as shown to the operator."""

    success: bool
    data: Any = None
    error: str | None = None
