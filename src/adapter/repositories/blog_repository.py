from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.blog_repository import IBlogRepository
from src.domain.base import utcnow
from src.domain.entities import Blog, User


class BlogRepository(IBlogRepository):
    """Blog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, blog_id: UUID) -> Optional[Blog]:
        """Get blog by ID"""
        stmt = select(Blog).where(Blog.id == blog_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_with_authors(self) -> List[Tuple[Blog, Optional[User]]]:
        """List blogs joined with their authors"""
        stmt = (
            select(Blog, User)
            .join(User, Blog.author_id == User.id, isouter=True)
            .order_by(Blog.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return [(blog, author) for blog, author in result.all()]

    async def create(self, blog: Blog) -> Blog:
        """Create a new blog"""
        self.session.add(blog)
        await self.session.flush()
        await self.session.refresh(blog)
        return blog

    async def update(self, blog: Blog) -> Blog:
        """Update existing blog"""
        blog.updated_at = utcnow()
        self.session.add(blog)
        await self.session.flush()
        await self.session.refresh(blog)
        return blog

    async def delete(self, blog: Blog) -> None:
        """Delete blog"""
        await self.session.delete(blog)
        await self.session.flush()
