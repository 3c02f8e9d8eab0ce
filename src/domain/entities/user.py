"""
User Entity

Represents an account that can sign in, author content and hold a role.
"""

import re
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow
from .enums import Role

DEFAULT_AVATAR = "default-avatar.png"

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")


def normalize_email(email: str) -> str:
    """Trim and lowercase an email address, rejecting anything without a basic address shape."""
    normalized = (email or "").strip().lower()
    if not EMAIL_PATTERN.match(normalized):
        raise ValueError("Invalid email format")
    return normalized


def normalize_username(username: str) -> str:
    normalized = (username or "").strip()
    if not normalized:
        raise ValueError("Username is required")
    if len(normalized) > 100:
        raise ValueError("Username must be at most 100 characters")
    return normalized


class User(SQLModel, table=True):
    """
    User entity - a person who can log in to the platform.

    Business Rules:
    - Username and email are unique across all users
    - Email is stored trimmed and lowercased
    - Password stored as bcrypt hash (cost factor 10), hashed by the repository write path
    - Role is never changed through self-service profile updates
    - reset_token and reset_token_expires_at are set and cleared together
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=100)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: Role = Field(default=Role.user)

    avatar: str = Field(default=DEFAULT_AVATAR, max_length=255)
    address: str = Field(default="", max_length=255)
    phone: str = Field(default="", max_length=50)

    # Password reset window
    reset_token: Optional[str] = Field(default=None, index=True, max_length=6)
    reset_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    def set_reset_token(self, token: str, expires_at: datetime) -> None:
        self.reset_token = token
        self.reset_token_expires_at = expires_at

    def clear_reset_token(self) -> None:
        self.reset_token = None
        self.reset_token_expires_at = None
