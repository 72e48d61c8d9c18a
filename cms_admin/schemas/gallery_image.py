"""Pydantic schemas for gallery images."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cms_admin.schemas.common import IdentifiedRequest, PositionedResponse, require_data_image


class GalleryImageCreate(BaseModel):
    """Schema for creating a gallery image."""

    image: str = Field(..., min_length=1)
    filename: str = Field(..., min_length=1)

    @field_validator("image")
    @classmethod
    def validate_image(cls, v: str) -> str:
        return require_data_image(v)


class GalleryImageUpdate(IdentifiedRequest, GalleryImageCreate):
    """Schema for updating a gallery image."""


class GalleryImageResponse(PositionedResponse):
    """Schema for gallery image response."""

    id: int
    image: str
    filename: str

    model_config = ConfigDict(from_attributes=True)
