"""
Reset Password Use Case

Consumes a reset PIN and sets a new password.
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow


class ResetPasswordUseCase:
    """
    Use case for completing a password reset.

    Business Rules:
    - PIN must match and its expiry must be strictly in the future
    - On success the new password is hashed by the repository write path
    - Both reset fields are cleared in the same write (single use)
    - A wrong or expired PIN leaves the stored window untouched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str, new_password: str) -> Result[None]:
        if not new_password:
            return Return.err(Error("VALIDATION_FAILED", "Password is required"))

        async with self.uow:
            user = None
            if token:
                user = await self.uow.users.get_by_reset_token(token, utcnow())

            if user is None:
                return Return.err(
                    Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired PIN")
                )

            user.clear_reset_token()
            await self.uow.users.update(user, password=new_password)
            await self.uow.commit()

            return Return.ok(None)
