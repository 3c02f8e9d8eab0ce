from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.app.services.password_hasher import PasswordHasher
from src.domain.base import utcnow
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession, hasher: PasswordHasher):
        self.session = session
        self.hasher = hasher

    def _apply_password(self, user: User, password: Optional[str]) -> None:
        if password is not None:
            user.password_hash = self.hasher.hash(password)
        if not user.password_hash:
            raise ValueError("User cannot be persisted without a password hash")

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_reset_token(self, token: str, now: datetime) -> Optional[User]:
        """Get user by active password reset token"""
        stmt = select(User).where(
            User.reset_token == token,
            User.reset_token_expires_at > now,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_all(self) -> List[User]:
        """List all users"""
        stmt = select(User).order_by(User.created_at)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, user: User, password: Optional[str] = None) -> User:
        """Create a new user"""
        self._apply_password(user, password)
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User, password: Optional[str] = None) -> User:
        """Update existing user"""
        self._apply_password(user, password)
        user.updated_at = utcnow()
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        """Delete user"""
        await self.session.delete(user)
        await self.session.flush()
