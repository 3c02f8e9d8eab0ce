from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.asset_guard import AssetLifecycleGuard
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User


class DeleteUserUseCase:
    """
    Use case for permanently removing a user (admin only).

    The avatar file is removed only after the record is gone. Posts written
    by the user stay published with no author.
    """

    def __init__(self, uow: UnitOfWork, asset_guard: AssetLifecycleGuard):
        self.uow = uow
        self.asset_guard = asset_guard

    async def execute(self, user_id: UUID) -> Result[None]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            return await self.asset_guard.release(user.avatar, lambda: self._delete(user))

    async def _delete(self, user: User) -> Result[None]:
        await self.uow.users.delete(user)
        await self.uow.commit()
        return Return.ok(None)
