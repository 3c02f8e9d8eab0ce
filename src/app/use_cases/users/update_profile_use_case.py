"""
Update Profile Use Case

Partial self-service update of the caller's own profile.
"""

from uuid import UUID

from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from src.app.services.asset_guard import AssetLifecycleGuard
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import ProfileInfo, ProfilePatch
from src.domain.entities import User, normalize_username


class UpdateProfileUseCase:
    """
    Use case for updating the current user's profile.

    Business Rules:
    - Only fields present on the patch change; everything else is preserved
    - Role and password cannot be reached through this path
    - Username is re-validated and must stay unique
    - User deleted since identity resolution is NOT_FOUND
    - A new avatar replaces the old one only after the write succeeds;
      if the write fails the new file is removed and the old one kept
    """

    def __init__(self, uow: UnitOfWork, asset_guard: AssetLifecycleGuard):
        self.uow = uow
        self.asset_guard = asset_guard

    async def execute(self, user_id: UUID, patch: ProfilePatch) -> Result[ProfileInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                await self.asset_guard.discard(patch.avatar)
                return Return.err(Error("NOT_FOUND", "User not found"))

            return await self.asset_guard.swap(
                user.avatar, patch.avatar, lambda: self._apply(user, patch)
            )

    async def _apply(self, user: User, patch: ProfilePatch) -> Result[ProfileInfo]:
        changes = patch.changes()

        if "username" in changes:
            try:
                changes["username"] = normalize_username(changes["username"])
            except ValueError as exc:
                return Return.err(Error("VALIDATION_FAILED", str(exc)))

        for field, value in changes.items():
            setattr(user, field, value)

        try:
            user = await self.uow.users.update(user)
            await self.uow.commit()
        except IntegrityError:
            return Return.err(Error("ALREADY_EXISTS", "Username already taken"))

        return Return.ok(ProfileInfo.from_entity(user))
