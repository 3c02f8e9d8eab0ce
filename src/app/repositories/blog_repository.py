from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Blog, User


class IBlogRepository(ABC):
    """Blog repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, blog_id: UUID) -> Optional[Blog]:
        """Get blog by ID"""
        pass

    @abstractmethod
    async def list_with_authors(self) -> List[Tuple[Blog, Optional[User]]]:
        """List blogs newest first, each paired with its author (None if the author is gone)"""
        pass

    @abstractmethod
    async def create(self, blog: Blog) -> Blog:
        """Create a new blog"""
        pass

    @abstractmethod
    async def update(self, blog: Blog) -> Blog:
        """Update existing blog"""
        pass

    @abstractmethod
    async def delete(self, blog: Blog) -> None:
        """Permanently remove a blog"""
        pass
