from cms_admin.services.auth import AuthService, auth_service
from cms_admin.services.banner_repository import BannerRepository
from cms_admin.services.class_repository import ClassRepository
from cms_admin.services.collection_repository import CollectionRepository, PositionedRepository
from cms_admin.services.faq_repository import FaqRepository
from cms_admin.services.gallery_repository import GalleryRepository
from cms_admin.services.google_oauth import GoogleOAuthClient, google_oauth_client
from cms_admin.services.review_repository import ReviewRepository

POSITIONED_REPOSITORIES: tuple[type[PositionedRepository], ...] = (
    FaqRepository,
    ReviewRepository,
    ClassRepository,
    GalleryRepository,
)

__all__ = [
    "AuthService",
    "auth_service",
    "BannerRepository",
    "ClassRepository",
    "CollectionRepository",
    "FaqRepository",
    "GalleryRepository",
    "GoogleOAuthClient",
    "google_oauth_client",
    "PositionedRepository",
    "POSITIONED_REPOSITORIES",
    "ReviewRepository",
]
