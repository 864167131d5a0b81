"""
User Service - credential store

Handles:
- Registration (hashing, Gravatar avatar)
- Lookup by id / email for the auth routes
- Removal as the last step of account deletion
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import Optional
import hashlib
import logging

from devconnector.core.exceptions import UserAlreadyExistsError
from devconnector.core.security import get_password_hash
from devconnector.models.user import User

logger = logging.getLogger(__name__)

GRAVATAR_URL = "https://www.gravatar.com/avatar"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def gravatar_url(email: str, size: int = 200, rating: str = "pg", default: str = "mm") -> str:
    """Gravatar image URL for an email address"""
    digest = hashlib.md5(normalize_email(email).encode("utf-8")).hexdigest()
    return f"{GRAVATAR_URL}/{digest}?s={size}&r={rating}&d={default}"


class UserService:
    """Persistence operations on User records"""

    async def get_by_id(self, db: AsyncSession, user_id: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(
            select(User).where(User.email == normalize_email(email))
        )
        return result.scalar_one_or_none()

    async def create_user(
        self,
        db: AsyncSession,
        name: str,
        email: str,
        password: str
    ) -> User:
        """
        Register a new user.

        Raises:
            UserAlreadyExistsError: the email is already registered
        """
        if await self.get_by_email(db, email):
            raise UserAlreadyExistsError()

        user = User(
            name=name.strip(),
            email=normalize_email(email),
            hashed_password=get_password_hash(password),
            avatar=gravatar_url(email),
        )

        db.add(user)
        await db.commit()
        await db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return user

    async def delete_user(self, db: AsyncSession, user_id: str) -> None:
        await db.execute(delete(User).where(User.id == user_id))
        await db.commit()
        logger.info(f"Deleted user {user_id}")


user_service = UserService()
