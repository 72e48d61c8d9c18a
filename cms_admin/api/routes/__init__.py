from cms_admin.api.routes.auth import router as auth_router
from cms_admin.api.routes.collections import (
    banners_router,
    classes_router,
    faqs_router,
    gallery_router,
    reviews_router,
)

__all__ = [
    "auth_router",
    # Content collections
    "banners_router",
    "classes_router",
    "faqs_router",
    "gallery_router",
    "reviews_router",
]
