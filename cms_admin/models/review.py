"""Review model."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from cms_admin.models.base import Base, IntegerIDMixin, PositionMixin


class Review(Base, IntegerIDMixin, PositionMixin):
    """Customer review with a 1-5 star rating."""

    __tablename__ = "reviews"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    review: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[str] = mapped_column(Text, nullable=False)
