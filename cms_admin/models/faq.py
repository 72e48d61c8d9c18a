"""FAQ model."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from cms_admin.models.base import Base, IntegerIDMixin, PositionMixin


class Faq(Base, IntegerIDMixin, PositionMixin):
    """Question/answer pair shown on the FAQ page."""

    __tablename__ = "faqs"

    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
