"""Repository for operators who signed in through Google."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cms_admin.models import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for user lookups and registration."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        if not email:
            raise ValueError("Email must not be empty")
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_or_create(self, email: str, name: str | None = None) -> User:
        """Return the user for ``email``, creating it on first sign-in."""
        user = await self.get_by_email(email)
        if user:
            return user

        user = User(email=email, name=name)
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)
        logger.info(f"Created user with ID: {user.id}, email: {email}")
        return user
