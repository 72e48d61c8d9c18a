from cms_admin.models.base import Base
from cms_admin.models.banner import Banner
from cms_admin.models.course import Course
from cms_admin.models.faq import Faq
from cms_admin.models.gallery_image import GalleryImage
from cms_admin.models.review import Review
from cms_admin.models.user import User

__all__ = [
    "Base",
    "Banner",
    "Course",
    "Faq",
    "GalleryImage",
    "Review",
    "User",
]
