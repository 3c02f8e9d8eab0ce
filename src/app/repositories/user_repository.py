from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer

    Write methods take an optional plaintext ``password``. When given, the
    repository hashes it into ``password_hash`` before persisting; when omitted,
    the stored hash is left exactly as it is.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_reset_token(self, token: str, now: datetime) -> Optional[User]:
        """Get user whose reset token matches and expires strictly after ``now``"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """List every user, oldest first"""
        pass

    @abstractmethod
    async def create(self, user: User, password: Optional[str] = None) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User, password: Optional[str] = None) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Permanently remove a user"""
        pass
