"""
Blog Use Case DTOs
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import Blog, User


class CreateBlogCommand(BaseModel):
    title: str
    content: str
    image: Optional[str] = None
    author_id: UUID


class BlogPatch(BaseModel):
    """Partial blog update; unset fields keep their stored value"""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    content: Optional[str] = None
    image: Optional[str] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class AuthorInfo(BaseModel):
    id: UUID
    username: str
    email: str


class BlogInfo(BaseModel):
    id: UUID
    title: str
    content: str
    image: str
    author_id: Optional[UUID] = None
    author: Optional[AuthorInfo] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, blog: Blog, author: Optional[User] = None) -> "BlogInfo":
        return cls(
            id=blog.id,
            title=blog.title,
            content=blog.content,
            image=blog.image,
            author_id=blog.author_id,
            author=(
                AuthorInfo(id=author.id, username=author.username, email=author.email)
                if author is not None
                else None
            ),
            created_at=blog.created_at,
            updated_at=blog.updated_at,
        )
