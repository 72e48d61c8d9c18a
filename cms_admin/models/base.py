"""Declarative base and shared column mixins."""

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""


class IntegerIDMixin:
    """Autoincrementing integer primary key; IDs are never reused."""

    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class PositionMixin:
    """Dense per-collection ordering key."""

    position: Mapped[int] = mapped_column(Integer, default=0, nullable=True)
