"""Class (course) model."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from cms_admin.models.base import Base, IntegerIDMixin, PositionMixin


class Course(Base, IntegerIDMixin, PositionMixin):
    """A class offered on the site, stored in the ``classes`` table."""

    __tablename__ = "classes"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    # Base64 data URI
    image: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[int] = mapped_column("isActive", Integer, nullable=False)
