"""
Blog Entity

A published post with a required cover image.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Blog(SQLModel, table=True):
    """
    Blog entity - a post written by a moderator or admin.

    Business Rules:
    - Title, content and cover image are required
    - The post owns its cover image file while it references it
    - Deleting the author does not delete their posts, it clears author_id
    """

    __tablename__ = "blogs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=255)
    content: str
    image: str = Field(max_length=255)

    author_id: Optional[UUID] = Field(
        default=None, foreign_key="users.id", ondelete="SET NULL", nullable=True, index=True
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
