"""
Resolve Identity Use Case

First stage of the access gate: session token -> principal.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.api.utils.jwt import SessionTokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo


class ResolveIdentityUseCase:
    """
    Use case for turning a session token into the current user.

    Business Rules:
    - Missing token: UNAUTHENTICATED ("no token")
    - Bad signature, expiry, malformed subject, or a deleted user:
      UNAUTHENTICATED ("invalid token"); the specific cause is only in Error.reason
    - The principal is returned as UserInfo, so no hash travels with it
    """

    def __init__(self, uow: UnitOfWork, codec: SessionTokenCodec):
        self.uow = uow
        self.codec = codec

    async def execute(self, token: Optional[str]) -> Result[UserInfo]:
        if not token:
            return Return.err(
                Error("UNAUTHENTICATED", "Not authorized: no token", reason="no token")
            )

        verified = self.codec.verify(token)
        if verified.is_err():
            return Return.err(self._invalid(verified.error.code))

        try:
            user_id = UUID(verified.value)
        except ValueError:
            return Return.err(self._invalid("MALFORMED_SUBJECT"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(self._invalid("SUBJECT_NOT_FOUND"))

            return Return.ok(UserInfo.from_entity(user))

    @staticmethod
    def _invalid(reason: str) -> Error:
        return Error("UNAUTHENTICATED", "Not authorized: invalid token", reason=reason)
