"""Repository for banner operations.

Banners are the one collection without a position column; they are listed
by ascending ID and cannot be moved.
"""

from cms_admin.models import Banner
from cms_admin.schemas.banner import BannerCreate, BannerResponse, BannerUpdate
from cms_admin.services.collection_repository import CollectionRepository


class BannerRepository(CollectionRepository[Banner]):
    """Repository for banner CRUD operations."""

    model = Banner
    create_schema = BannerCreate
    update_schema = BannerUpdate
    response_schema = BannerResponse
    label = "banner"
    invalid_message = "Title, subtitle, and message are required"
    redacted_fields = ("gif",)
