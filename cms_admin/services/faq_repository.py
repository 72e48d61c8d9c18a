"""Repository for FAQ operations."""

from cms_admin.models import Faq
from cms_admin.schemas.faq import FaqCreate, FaqResponse, FaqUpdate
from cms_admin.services.collection_repository import PositionedRepository


class FaqRepository(PositionedRepository[Faq]):
    """Repository for FAQ CRUD and ordering."""

    model = Faq
    create_schema = FaqCreate
    update_schema = FaqUpdate
    response_schema = FaqResponse
    label = "FAQ"
    invalid_message = "Question and answer are required"
