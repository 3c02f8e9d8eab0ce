"""
User Management Use Cases

All user-related business logic.
"""

from .update_profile_use_case import UpdateProfileUseCase
from .delete_user_use_case import DeleteUserUseCase
from .list_users_use_case import ListUsersUseCase

__all__ = [
    "UpdateProfileUseCase",
    "DeleteUserUseCase",
    "ListUsersUseCase",
]
