"""Banner model."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from cms_admin.models.base import Base, IntegerIDMixin


class Banner(Base, IntegerIDMixin):
    """Site banner. Ordered by ID only, banners carry no position."""

    __tablename__ = "banners"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    subtitle: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    # Base64 data URI
    gif: Mapped[str | None] = mapped_column(Text, nullable=True)
