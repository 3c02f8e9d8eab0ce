"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
None of them carries a password hash.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import Role, User


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Registration intent; ``avatar`` is an already-stored upload filename"""

    username: str
    email: str
    password: str
    avatar: Optional[str] = None


class ResetPinIssued(BaseModel):
    """A freshly opened reset window, addressed to the email on record"""

    email: str
    pin: str


class ProfilePatch(BaseModel):
    """
    Partial profile update.

    Only fields explicitly set on the patch are applied; unset fields keep
    their stored value. Role and password are deliberately not fields here.
    """

    model_config = ConfigDict(extra="forbid")

    username: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    avatar: Optional[str] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public view of a user"""

    id: UUID
    username: str
    email: str
    avatar: str
    role: str

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            avatar=user.avatar,
            role=Role(user.role).value,
        )


class ProfileInfo(UserInfo):
    """Public view of a user including contact fields"""

    address: str
    phone: str

    @classmethod
    def from_entity(cls, user: User) -> "ProfileInfo":
        return cls(
            **UserInfo.from_entity(user).model_dump(),
            address=user.address,
            phone=user.phone,
        )
