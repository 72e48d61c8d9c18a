"""Repository for gallery image operations."""

from cms_admin.models import GalleryImage
from cms_admin.schemas.gallery_image import (
    GalleryImageCreate,
    GalleryImageResponse,
    GalleryImageUpdate,
)
from cms_admin.services.collection_repository import PositionedRepository


class GalleryRepository(PositionedRepository[GalleryImage]):
    """Repository for gallery image CRUD and ordering."""

    model = GalleryImage
    create_schema = GalleryImageCreate
    update_schema = GalleryImageUpdate
    response_schema = GalleryImageResponse
    label = "gallery image"
    invalid_message = "Image and filename are required"
    redacted_fields = ("image",)
