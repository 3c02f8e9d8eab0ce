from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo


class ListUsersUseCase:
    """Use case for listing every account (admin only). Hashes never leave the store."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[UserInfo]]:
        async with self.uow:
            users = await self.uow.users.list_all()
            return Return.ok([UserInfo.from_entity(user) for user in users])
