"""Collection routes: one router per content collection.

Every collection exposes the same verbs on ``/api/<collection>``:
GET (list), POST (create), PUT (update), DELETE and, for positioned
collections, PATCH (move one step up or down). Bodies carry the row ID.

Validation failures are answered with 400. Anything else, including a
missing row, is answered with 500 and the error message in ``details``.
"""

import logging
from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from cms_admin.api.deps import CurrentAdmin, DBSession
from cms_admin.api.errors import ERROR_RESPONSES, error_response
from cms_admin.errors import ValidationError
from cms_admin.schemas.common import DeleteRequest, MessageResponse, MoveRequest
from cms_admin.services.banner_repository import BannerRepository
from cms_admin.services.class_repository import ClassRepository
from cms_admin.services.collection_repository import CollectionRepository, PositionedRepository
from cms_admin.services.faq_repository import FaqRepository
from cms_admin.services.gallery_repository import GalleryRepository
from cms_admin.services.review_repository import ReviewRepository

logger = logging.getLogger(__name__)

Payload = Annotated[dict[str, Any], Body()]


@dataclass(frozen=True)
class CollectionResource:
    """Wiring and wording for one collection's routes."""

    repository: type[CollectionRepository]
    path: str
    # Used in failure messages: "Failed to create <noun>", "Failed to fetch <plural>"
    noun: str
    plural: str
    deleted_message: str
    # Used in "<moved_noun> moved up"
    moved_noun: str = ""


async def _failure(db: AsyncSession, error: str, exc: Exception) -> JSONResponse:
    await db.rollback()
    logger.error(f"{error}: {exc}", exc_info=True)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, error, str(exc))


def build_collection_router(resource: CollectionResource) -> APIRouter:
    """Create the router for one collection."""
    repository_cls = resource.repository
    response_model = repository_cls.response_schema
    router = APIRouter(prefix=f"/{resource.path}", tags=[resource.path])

    @router.get("", response_model=list[response_model], responses=ERROR_RESPONSES)
    async def list_items(db: DBSession):
        """List the collection in display order."""
        try:
            return await repository_cls(db).list_all()
        except Exception as e:
            return await _failure(db, f"Failed to fetch {resource.plural}", e)

    @router.post(
        "",
        response_model=response_model,
        status_code=status.HTTP_201_CREATED,
        responses=ERROR_RESPONSES,
    )
    async def create_item(payload: Payload, current_admin: CurrentAdmin, db: DBSession):
        """Create an item at the end of the collection."""
        logger.debug(f"POST /api/{resource.path} by {current_admin.email}")
        repository = repository_cls(db)

        try:
            return await repository.create(payload)
        except ValidationError as e:
            return error_response(status.HTTP_400_BAD_REQUEST, str(e), e.details)
        except Exception as e:
            return await _failure(db, f"Failed to create {resource.noun}", e)

    @router.put("", response_model=response_model, responses=ERROR_RESPONSES)
    async def update_item(payload: Payload, current_admin: CurrentAdmin, db: DBSession):
        """Replace an item's content."""
        logger.debug(f"PUT /api/{resource.path} by {current_admin.email}")
        repository = repository_cls(db)

        try:
            data = repository.validate(repository.update_schema, payload)
            return await repository.update(data.id, data)
        except ValidationError as e:
            return error_response(status.HTTP_400_BAD_REQUEST, str(e), e.details)
        except Exception as e:
            return await _failure(db, f"Failed to update {resource.noun}", e)

    @router.delete("", response_model=MessageResponse, responses=ERROR_RESPONSES)
    async def delete_item(payload: Payload, current_admin: CurrentAdmin, db: DBSession):
        """Delete an item."""
        logger.debug(f"DELETE /api/{resource.path} by {current_admin.email}")
        repository = repository_cls(db)

        try:
            data = repository.validate(DeleteRequest, payload, message="ID is required")
            await repository.delete(data.id)
            return MessageResponse(message=resource.deleted_message)
        except ValidationError as e:
            return error_response(status.HTTP_400_BAD_REQUEST, str(e), e.details)
        except Exception as e:
            return await _failure(db, f"Failed to delete {resource.noun}", e)

    if issubclass(repository_cls, PositionedRepository):

        @router.patch("", response_model=MessageResponse, responses=ERROR_RESPONSES)
        async def move_item(payload: Payload, current_admin: CurrentAdmin, db: DBSession):
            """Move an item one step up or down. Moving past either end is a no-op."""
            logger.debug(f"PATCH /api/{resource.path} by {current_admin.email}")
            repository = repository_cls(db)

            try:
                data = repository.validate(
                    MoveRequest, payload, message="ID and direction are required"
                )
                await repository.move(data.id, data.direction)
                return MessageResponse(
                    message=f"{resource.moved_noun} moved {data.direction.value}"
                )
            except ValidationError as e:
                return error_response(status.HTTP_400_BAD_REQUEST, str(e), e.details)
            except Exception as e:
                return await _failure(db, f"Failed to move {resource.moved_noun}", e)

    return router


faqs_resource = CollectionResource(
    repository=FaqRepository,
    path="faqs",
    noun="faq",
    plural="faqs",
    deleted_message="Faq deleted",
    moved_noun="FAQ",
)
reviews_resource = CollectionResource(
    repository=ReviewRepository,
    path="reviews",
    noun="review",
    plural="reviews",
    deleted_message="Review deleted",
    moved_noun="Review",
)
classes_resource = CollectionResource(
    repository=ClassRepository,
    path="classes",
    noun="class",
    plural="classes",
    deleted_message="Class deleted",
    moved_noun="Class",
)
gallery_resource = CollectionResource(
    repository=GalleryRepository,
    path="gallery",
    noun="gallery image",
    plural="gallery images",
    deleted_message="Gallery image deleted",
    moved_noun="Image",
)
banners_resource = CollectionResource(
    repository=BannerRepository,
    path="banners",
    noun="banner",
    plural="banners",
    deleted_message="Banner deleted",
)

faqs_router = build_collection_router(faqs_resource)
reviews_router = build_collection_router(reviews_resource)
classes_router = build_collection_router(classes_resource)
gallery_router = build_collection_router(gallery_resource)
banners_router = build_collection_router(banners_resource)
