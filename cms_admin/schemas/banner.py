"""Pydantic schemas for banners."""

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from cms_admin.schemas.common import IdentifiedRequest, require_data_image


class BannerCreate(BaseModel):
    """Schema for creating a banner."""

    title: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    gif: str | None = None

    @field_validator("gif")
    @classmethod
    def validate_gif(cls, v: str | None) -> str | None:
        """Empty strings are stored as null; anything else must be a data URI."""
        if not v:
            return None
        return require_data_image(v)


class BannerUpdate(IdentifiedRequest, BannerCreate):
    """Schema for updating a banner."""


class BannerResponse(BaseModel):
    """Schema for banner response."""

    id: int
    title: str
    subtitle: str
    message: str
    gif: str | None = None

    model_config = ConfigDict(from_attributes=True)

    @computed_field(alias="isHtml")
    @property
    def is_html(self) -> bool:
        return any("<" in field for field in (self.title, self.subtitle, self.message))
