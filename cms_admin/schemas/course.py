"""Pydantic schemas for classes."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from cms_admin.schemas.common import (
    IdentifiedRequest,
    PositionedResponse,
    require_data_image,
    require_integer,
)

IS_ACTIVE_MESSAGE = "isActive must be 0 or 1"


class CourseCreate(BaseModel):
    """Schema for creating a class."""

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    is_active: int = Field(
        ...,
        validation_alias=AliasChoices("isActive", "is_active"),
        serialization_alias="isActive",
    )

    @field_validator("image")
    @classmethod
    def validate_image(cls, v: str) -> str:
        return require_data_image(v)

    @field_validator("is_active", mode="before")
    @classmethod
    def validate_is_active(cls, v: Any) -> Any:
        return require_integer(v, IS_ACTIVE_MESSAGE, low=0, high=1)


class CourseUpdate(IdentifiedRequest, CourseCreate):
    """Schema for updating a class."""


class CourseResponse(PositionedResponse):
    """Schema for class response."""

    id: int
    name: str
    description: str
    url: str
    image: str
    is_active: int = Field(
        validation_alias=AliasChoices("is_active", "isActive"),
        serialization_alias="isActive",
    )

    model_config = ConfigDict(from_attributes=True)
