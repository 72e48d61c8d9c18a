"""Repository for review operations."""

from cms_admin.models import Review
from cms_admin.schemas.review import ReviewCreate, ReviewResponse, ReviewUpdate
from cms_admin.services.collection_repository import PositionedRepository


class ReviewRepository(PositionedRepository[Review]):
    """Repository for review CRUD and ordering."""

    model = Review
    create_schema = ReviewCreate
    update_schema = ReviewUpdate
    response_schema = ReviewResponse
    label = "review"
    invalid_message = "All fields are required, and rating must be an integer between 1 and 5"
