"""Pydantic schemas for FAQs."""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from cms_admin.schemas.common import IdentifiedRequest, PositionedResponse


class FaqCreate(BaseModel):
    """Schema for creating an FAQ."""

    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)


class FaqUpdate(IdentifiedRequest, FaqCreate):
    """Schema for updating an FAQ."""


class FaqResponse(PositionedResponse):
    """Schema for FAQ response."""

    id: int
    question: str
    answer: str

    model_config = ConfigDict(from_attributes=True)

    @computed_field(alias="isHtml")
    @property
    def is_html(self) -> bool:
        return "<" in self.answer
