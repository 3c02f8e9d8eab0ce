"""
Blog Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class Role(str, Enum):
    """Platform-wide user role"""

    user = "user"
    moderator = "moderator"
    admin = "admin"
