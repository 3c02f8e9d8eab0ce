"""
Access Control Use Cases

Identity resolution followed by role checking.
"""

from .resolve_identity_use_case import ResolveIdentityUseCase
from .check_role import check_role

__all__ = [
    "ResolveIdentityUseCase",
    "check_role",
]
