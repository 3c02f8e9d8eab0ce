"""
Blog Service Domain Entities

All domain entities organized by model.
"""

from .enums import Role

from .user import DEFAULT_AVATAR, User, normalize_email, normalize_username
from .blog import Blog

__all__ = [
    # Enums
    "Role",
    # Entities
    "User",
    "Blog",
    # Helpers
    "DEFAULT_AVATAR",
    "normalize_email",
    "normalize_username",
]
