"""
Forgot Password Use Case

Opens a password reset window for an account.
"""

from libs.result import Error, Result, Return
from src.app.services.reset_token_generator import ResetTokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import normalize_email
from .dtos import ResetPinIssued

MAX_PIN_ATTEMPTS = 5


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset PIN.

    Business Rules:
    - Unknown email is NOT_FOUND
    - PIN is 6 digits and expires 1 hour after issuance
    - A new request overwrites any earlier PIN for the same user
    - A PIN that is currently active for another user is not handed out again
    - The PIN and the stored address are returned to the caller, which owns delivery
    """

    def __init__(self, uow: UnitOfWork, token_generator: ResetTokenGenerator):
        self.uow = uow
        self.token_generator = token_generator

    async def execute(self, email: str) -> Result[ResetPinIssued]:
        not_found = Error("NOT_FOUND", "User not found")

        try:
            email = normalize_email(email)
        except ValueError:
            return Return.err(not_found)

        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(not_found)

            for _ in range(MAX_PIN_ATTEMPTS):
                token, expires_at = self.token_generator.generate()
                holder = await self.uow.users.get_by_reset_token(
                    token, self.token_generator.clock()
                )
                if holder is None or holder.id == user.id:
                    break
            else:
                return Return.err(
                    Error("RESET_PIN_UNAVAILABLE", "Could not issue a reset PIN")
                )

            user.set_reset_token(token, expires_at)
            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(ResetPinIssued(email=user.email, pin=token))
