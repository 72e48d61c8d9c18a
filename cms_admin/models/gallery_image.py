"""Gallery image model."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from cms_admin.models.base import Base, IntegerIDMixin, PositionMixin


class GalleryImage(Base, IntegerIDMixin, PositionMixin):
    """Image stored inline as a base64 data URI."""

    __tablename__ = "gallery_images"

    image: Mapped[str] = mapped_column(Text, nullable=False)
    filename: Mapped[str] = mapped_column(Text, nullable=False)
