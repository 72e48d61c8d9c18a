"""Input validation tests.

Tests cover:
- Required fields per collection
- Strict rating and isActive integers
- Base64 image data URIs
- Banner gif normalisation
"""

import re

import pytest
from pydantic import ValidationError as SchemaError

from cms_admin.errors import ValidationError
from cms_admin.schemas.banner import BannerCreate
from cms_admin.schemas.course import CourseCreate
from cms_admin.schemas.faq import FaqResponse
from cms_admin.services import (
    BannerRepository,
    ClassRepository,
    FaqRepository,
    GalleryRepository,
    ReviewRepository,
)

from conftest import GIF_DATA, PNG_DATA

RATING_ERROR = "Rating must be an integer between 1 and 5"
IMAGE_ERROR = re.escape("Image must be a valid base64-encoded image (data:image/*;base64,...)")


def review_fields(**overrides):
    return {"name": "Ann", "review": "Lovely", "rating": 4, "date": "2024-05-01", **overrides}


def class_fields(**overrides):
    return {
        "name": "Pottery",
        "description": "Wheel throwing",
        "url": "https://example.com/pottery",
        "image": PNG_DATA,
        "isActive": 1,
        **overrides,
    }


class TestRequiredFields:
    """Missing or empty fields use the collection's message."""

    async def test_faq_requires_question_and_answer(self, session):
        with pytest.raises(ValidationError, match="Question and answer are required"):
            await FaqRepository(session).create({"question": "Q"})

    async def test_faq_rejects_empty_answer(self, session):
        with pytest.raises(ValidationError, match="Question and answer are required"):
            await FaqRepository(session).create({"question": "Q", "answer": ""})

    async def test_banner_requires_message(self, session):
        with pytest.raises(ValidationError, match="Title, subtitle, and message are required"):
            await BannerRepository(session).create({"title": "T", "subtitle": "S"})

    async def test_gallery_requires_filename(self, session):
        with pytest.raises(ValidationError, match="Image and filename are required"):
            await GalleryRepository(session).create({"image": PNG_DATA})

    async def test_class_requires_url(self, session):
        fields = class_fields()
        del fields["url"]
        with pytest.raises(ValidationError, match="All class fields are required"):
            await ClassRepository(session).create(fields)

    async def test_details_name_the_field(self, session):
        with pytest.raises(ValidationError) as exc_info:
            await FaqRepository(session).create({"question": "Q"})
        assert "answer" in exc_info.value.details

    async def test_rejected_create_writes_nothing(self, session):
        repo = FaqRepository(session)
        with pytest.raises(ValidationError):
            await repo.create({"answer": "A"})
        assert await repo.list_all() == []


class TestRating:
    """Ratings must be integers in 1..5, on create and on update."""

    @pytest.mark.parametrize("rating", [0, 6, 4.5, "4", True, None])
    async def test_create_rejects_bad_rating(self, session, rating):
        with pytest.raises(ValidationError, match=RATING_ERROR):
            await ReviewRepository(session).create(review_fields(rating=rating))

    @pytest.mark.parametrize("rating", [1, 5, 3.0])
    async def test_create_accepts_integral_rating(self, session, rating):
        review = await ReviewRepository(session).create(review_fields(rating=rating))
        assert review.rating == int(rating)

    @pytest.mark.parametrize("rating", [0, 6, 4.5, "4"])
    async def test_update_rejects_bad_rating(self, session, rating):
        repo = ReviewRepository(session)
        review = await repo.create(review_fields())

        with pytest.raises(ValidationError, match=RATING_ERROR):
            await repo.update(review.id, review_fields(rating=rating))

        assert (await repo.get(review.id)).rating == 4


class TestImages:
    """Image columns hold base64 data URIs."""

    @pytest.mark.parametrize(
        "image", ["https://example.com/a.png", "iVBORw0KGgo", "data:text/plain;base64,aGk="]
    )
    async def test_gallery_rejects_non_data_image(self, session, image):
        with pytest.raises(ValidationError, match=IMAGE_ERROR):
            await GalleryRepository(session).create({"image": image, "filename": "a.png"})

    async def test_class_rejects_non_data_image(self, session):
        with pytest.raises(ValidationError, match=IMAGE_ERROR):
            await ClassRepository(session).create(class_fields(image="/static/a.png"))

    async def test_banner_rejects_non_data_gif(self, session):
        with pytest.raises(ValidationError, match=IMAGE_ERROR):
            await BannerRepository(session).create(
                {"title": "T", "subtitle": "S", "message": "M", "gif": "party.gif"}
            )

    async def test_gallery_accepts_data_image(self, session):
        image = await GalleryRepository(session).create({"image": PNG_DATA, "filename": "a.png"})
        assert image.image == PNG_DATA


class TestBannerGif:
    def test_empty_gif_becomes_none(self):
        banner = BannerCreate(title="T", subtitle="S", message="M", gif="")
        assert banner.gif is None

    def test_missing_gif_is_none(self):
        assert BannerCreate(title="T", subtitle="S", message="M").gif is None

    async def test_gif_is_stored(self, session):
        banner = await BannerRepository(session).create(
            {"title": "T", "subtitle": "S", "message": "M", "gif": GIF_DATA}
        )
        assert banner.gif == GIF_DATA


class TestIsActive:
    """Classes carry an isActive flag of 0 or 1."""

    @pytest.mark.parametrize("value", [2, -1, "1", True])
    def test_rejects_values_other_than_zero_or_one(self, value):
        with pytest.raises(SchemaError):
            CourseCreate.model_validate(class_fields(isActive=value))

    async def test_repository_rejects_is_active_two(self, session):
        with pytest.raises(ValidationError, match="isActive must be 0 or 1"):
            await ClassRepository(session).create(class_fields(isActive=2))

    def test_accepts_snake_case_key(self):
        fields = class_fields()
        fields["is_active"] = fields.pop("isActive")
        assert CourseCreate.model_validate(fields).is_active == 1

    def test_serializes_as_camel_case(self):
        dumped = CourseCreate.model_validate(class_fields(isActive=0)).model_dump(by_alias=True)
        assert dumped["isActive"] == 0


class TestIsHtml:
    def test_plain_answer(self):
        faq = FaqResponse(id=1, question="Q", answer="Plain text", position=0)
        assert faq.model_dump(by_alias=True)["isHtml"] is False

    def test_markup_answer(self):
        faq = FaqResponse(id=1, question="Q", answer="<p>Rich</p>", position=None)
        dumped = faq.model_dump(by_alias=True)
        assert dumped["isHtml"] is True
        assert dumped["position"] == 0
