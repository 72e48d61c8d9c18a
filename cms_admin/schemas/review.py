"""Pydantic schemas for reviews."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cms_admin.schemas.common import IdentifiedRequest, PositionedResponse, require_integer

RATING_MESSAGE = "Rating must be an integer between 1 and 5"


class ReviewCreate(BaseModel):
    """Schema for creating a review."""

    name: str = Field(..., min_length=1)
    review: str = Field(..., min_length=1)
    rating: int = Field(...)
    date: str = Field(..., min_length=1)

    @field_validator("rating", mode="before")
    @classmethod
    def validate_rating(cls, v: Any) -> Any:
        return require_integer(v, RATING_MESSAGE, low=1, high=5)


class ReviewUpdate(IdentifiedRequest, ReviewCreate):
    """Schema for updating a review."""


class ReviewResponse(PositionedResponse):
    """Schema for review response."""

    id: int
    name: str
    review: str
    rating: int
    date: str

    model_config = ConfigDict(from_attributes=True)
