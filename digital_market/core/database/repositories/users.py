"""
User repository.

Insert and lookup operations for marketplace users.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.users import User
from ..schemas.users import UserCreate
from .base import AsyncBaseRepository


class UserRepository(AsyncBaseRepository[User, UserCreate]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User, UserCreate)

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get a user by their unique username.

        Args:
            username: Login name

        Returns:
            User instance or None
        """
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
