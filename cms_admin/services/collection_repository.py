"""Generic repositories for content collections.

``CollectionRepository`` covers plain CRUD (banners). ``PositionedRepository``
adds the ordering protocol shared by FAQs, reviews, classes and gallery
images:

- new rows are appended at ``max(position) + 1`` (0 for an empty table);
- ``move`` swaps a row with its neighbour at ``position +/- 1``; exactly two
  rows change, and moving past either end is a successful no-op;
- ``delete`` leaves a gap unless renumbering is enabled, in which case the
  remaining rows are compacted to ``0..N-1``.

Every operation runs inside the caller's session transaction. With
``atomic_swap`` the two position writes of a move are issued as one
``UPDATE ... CASE`` statement; otherwise as two sequential UPDATEs.
"""

import logging
from collections import Counter
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import case, delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cms_admin.config import settings
from cms_admin.errors import NotFoundError, StorageError, ValidationError
from cms_admin.models.base import Base
from cms_admin.schemas.common import DIRECTION_MESSAGE, Direction, PositionReport

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
SchemaT = TypeVar("SchemaT", bound=BaseModel)


def abbreviate(value: str) -> str:
    """Shorten a base64 payload for logging."""
    return f"base64(...{value[-20:]})"


def format_validation_errors(exc: PydanticValidationError) -> str:
    """Flatten pydantic errors into ``field: message`` pairs."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"]) or "body"
        message = error["msg"].removeprefix("Value error, ")
        parts.append(f"{field}: {message}")
    return "; ".join(parts)


class CollectionRepository(Generic[ModelT]):
    """CRUD over one collection table, ordered by ID."""

    model: ClassVar[type[Base]]
    create_schema: ClassVar[type[BaseModel]]
    update_schema: ClassVar[type[BaseModel]]
    response_schema: ClassVar[type[BaseModel]]
    # Human-readable name used in messages, e.g. "FAQ"
    label: ClassVar[str]
    invalid_message: ClassVar[str]
    # Columns holding base64 payloads, abbreviated in logs
    redacted_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, db: AsyncSession):
        self.db = db

    # -- validation -----------------------------------------------------

    def validate(
        self,
        schema: type[SchemaT],
        fields: Mapping[str, Any] | BaseModel,
        message: str | None = None,
    ) -> SchemaT:
        """Validate ``fields`` against ``schema``, raising ``ValidationError``.

        ``message`` replaces the collection's default error wording.
        """
        message = message or self.invalid_message
        if isinstance(fields, schema):
            return fields
        if isinstance(fields, BaseModel):
            fields = fields.model_dump()
        if not isinstance(fields, Mapping):
            raise ValidationError(message, details="Request body must be a JSON object")

        try:
            return schema.model_validate(fields)
        except PydanticValidationError as e:
            details = format_validation_errors(e)
            logger.info(f"Rejected {self.label} input: {details}")
            # Field checks with their own wording (image format, rating) win
            custom = [err["msg"] for err in e.errors() if err["type"] == "value_error"]
            error = custom[0].removeprefix("Value error, ") if custom else message
            raise ValidationError(error, details=details) from e

    def check_id(self, item_id: Any) -> int:
        """Require a positive integer ID."""
        if isinstance(item_id, bool) or not isinstance(item_id, int) or item_id <= 0:
            raise ValidationError(f"Invalid {self.label} ID", details=f"id: {item_id!r}")
        return item_id

    def describe(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Copy of ``values`` safe to log."""
        return {
            key: abbreviate(value) if key in self.redacted_fields and isinstance(value, str) else value
            for key, value in values.items()
        }

    # -- storage helpers ------------------------------------------------

    async def _execute(self, statement, action: str):
        try:
            return await self.db.execute(statement)
        except SQLAlchemyError as e:
            logger.error(f"Error trying to {action} {self.label}: {e}")
            raise StorageError(f"Failed to {action} {self.label}: {e}") from e

    def ordering(self) -> tuple:
        return (self.model.id.asc(),)

    async def prepare_insert(self, values: dict[str, Any]) -> None:
        """Hook for subclasses to fill server-assigned columns before insert."""

    async def after_delete(self) -> None:
        """Hook for subclasses to run bookkeeping after a delete."""

    # -- operations -----------------------------------------------------

    async def list_all(self) -> list[ModelT]:
        """All rows in display order."""
        result = await self._execute(
            select(self.model).order_by(*self.ordering()).execution_options(populate_existing=True),
            "fetch",
        )
        return list(result.scalars().all())

    async def get(self, item_id: int) -> ModelT | None:
        """Get a row by ID."""
        result = await self._execute(
            select(self.model)
            .where(self.model.id == item_id)
            .execution_options(populate_existing=True),
            "fetch",
        )
        return result.scalar_one_or_none()

    async def create(self, fields: Mapping[str, Any] | BaseModel) -> ModelT:
        """Validate and insert a new row. The returned row carries its new ID."""
        data = self.validate(self.create_schema, fields)
        values = data.model_dump(include=set(self.create_schema.model_fields))
        await self.prepare_insert(values)

        item = self.model(**values)
        self.db.add(item)
        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Error creating {self.label}: {e}")
            raise StorageError(f"Failed to create {self.label}: {e}") from e

        if item.id is None:
            raise StorageError("Failed to get last insert row ID")

        logger.info(f"Created {self.label} with ID: {item.id} {self.describe(values)}")
        return item

    async def update(self, item_id: int, fields: Mapping[str, Any] | BaseModel) -> ModelT:
        """Replace a row's content fields. Never touches ``position``."""
        item_id = self.check_id(item_id)
        data = self.validate(self.create_schema, fields)
        values = data.model_dump(include=set(self.create_schema.model_fields))

        result = await self._execute(
            update(self.model)
            .where(self.model.id == item_id)
            .values({getattr(self.model, key): value for key, value in values.items()})
            .execution_options(synchronize_session=False),
            "update",
        )
        if result.rowcount == 0:
            logger.warning(f"No {self.label} found with ID: {item_id}")
            raise NotFoundError(f"No {self.label} found with ID: {item_id}")

        logger.info(f"Updated {self.label} with ID: {item_id}")
        item = await self.get(item_id)
        if item is None:
            raise StorageError(f"{self.label} with ID {item_id} vanished after update")
        return item

    async def delete(self, item_id: int) -> None:
        """Physically remove a row."""
        item_id = self.check_id(item_id)

        result = await self._execute(
            delete(self.model)
            .where(self.model.id == item_id)
            .execution_options(synchronize_session=False),
            "delete",
        )
        if result.rowcount == 0:
            logger.warning(f"No {self.label} found with ID: {item_id}")
            raise NotFoundError(f"No {self.label} found with ID: {item_id}")

        logger.info(f"Deleted {self.label} with ID: {item_id}")
        await self.after_delete()


class PositionedRepository(CollectionRepository[ModelT]):
    """Collection whose rows carry a dense ``position`` ordering key."""

    def __init__(
        self,
        db: AsyncSession,
        renumber_on_delete: bool | None = None,
        atomic_swap: bool | None = None,
    ):
        super().__init__(db)
        self.renumber_on_delete = (
            settings.renumber_on_delete if renumber_on_delete is None else renumber_on_delete
        )
        self.atomic_swap = settings.atomic_swap if atomic_swap is None else atomic_swap

    @property
    def collection(self) -> str:
        return self.model.__tablename__

    def ordering(self) -> tuple:
        return (self.model.position.asc(), self.model.id.asc())

    async def _get_next_position(self) -> int:
        """Get the next available position (append at the end)."""
        result = await self._execute(
            select(func.coalesce(func.max(self.model.position), -1) + 1),
            "fetch",
        )
        return result.scalar() or 0

    async def prepare_insert(self, values: dict[str, Any]) -> None:
        values["position"] = await self._get_next_position()

    async def after_delete(self) -> None:
        if self.renumber_on_delete:
            await self.compact()

    async def move(self, item_id: int, direction: Direction | str) -> bool:
        """Swap a row with its neighbour one step up or down.

        Returns False, without writing anything, when the row is already
        first (moving up) or last (moving down).
        """
        item_id = self.check_id(item_id)
        try:
            direction = Direction(direction)
        except ValueError as e:
            raise ValidationError(DIRECTION_MESSAGE, details=f"direction: {direction!r}") from e

        logger.info(f"Moving {self.label} {item_id} {direction.value}")

        result = await self._execute(
            select(self.model.id, self.model.position).where(self.model.id == item_id),
            "move",
        )
        current = result.one_or_none()
        if current is None:
            logger.warning(f"No {self.label} found with ID: {item_id}")
            raise NotFoundError(f"No {self.label} found with ID: {item_id}")

        current_position = current.position or 0
        target_position = current_position - 1 if direction is Direction.UP else current_position + 1

        result = await self._execute(
            select(self.model.id)
            .where(self.model.position == target_position)
            .order_by(self.model.id.asc())
            .limit(1),
            "move",
        )
        target_id = result.scalar_one_or_none()
        if target_id is None:
            logger.info(
                f"No {self.label} at position {target_position}, cannot move {direction.value}"
            )
            return False

        if self.atomic_swap:
            await self._swap_single_statement(item_id, target_id, current_position, target_position)
        else:
            await self._swap_two_step(item_id, target_id, current_position, target_position)

        logger.info(
            f"Swapped positions: {self.label} {item_id} ({current_position} -> {target_position}), "
            f"{self.label} {target_id} ({target_position} -> {current_position})"
        )
        return True

    async def _swap_single_statement(
        self, item_id: int, target_id: int, current_position: int, target_position: int
    ) -> None:
        result = await self._execute(
            update(self.model)
            .where(self.model.id.in_([item_id, target_id]))
            .values(
                position=case(
                    (self.model.id == item_id, target_position),
                    else_=current_position,
                )
            )
            .execution_options(synchronize_session=False),
            "move",
        )
        if result.rowcount != 2:
            raise StorageError(
                f"Failed to move {self.label}: expected 2 rows swapped, got {result.rowcount}"
            )

    async def _swap_two_step(
        self, item_id: int, target_id: int, current_position: int, target_position: int
    ) -> None:
        for row_id, position in ((item_id, target_position), (target_id, current_position)):
            await self._execute(
                update(self.model)
                .where(self.model.id == row_id)
                .values(position=position)
                .execution_options(synchronize_session=False),
                "move",
            )

    async def compact(self) -> int:
        """Renumber rows to ``0..N-1`` keeping their order. Returns rows changed."""
        result = await self._execute(
            select(self.model.id, self.model.position).order_by(*self.ordering()),
            "compact",
        )
        rows = result.all()

        changed = 0
        for index, row in enumerate(rows):
            if row.position != index:
                await self._execute(
                    update(self.model)
                    .where(self.model.id == row.id)
                    .values(position=index)
                    .execution_options(synchronize_session=False),
                    "compact",
                )
                changed += 1

        if changed:
            logger.info(f"Recompacted {changed} {self.collection} positions")
        return changed

    async def check_density(self) -> PositionReport:
        """Report gaps and duplicates against the expected ``0..N-1``."""
        result = await self._execute(select(func.coalesce(self.model.position, 0)), "fetch")
        counts = Counter(result.scalars().all())
        count = sum(counts.values())

        return PositionReport(
            collection=self.collection,
            count=count,
            gaps=[position for position in range(count) if position not in counts],
            duplicates=sorted(position for position, n in counts.items() if n > 1),
        )
