"""Repository for class operations."""

from cms_admin.models import Course
from cms_admin.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from cms_admin.services.collection_repository import PositionedRepository


class ClassRepository(PositionedRepository[Course]):
    """Repository for class CRUD and ordering."""

    model = Course
    create_schema = CourseCreate
    update_schema = CourseUpdate
    response_schema = CourseResponse
    label = "class"
    invalid_message = "All class fields are required"
    redacted_fields = ("image",)
