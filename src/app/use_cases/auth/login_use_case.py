"""
Login Use Case

Verifies credentials. Session token issuance happens at the API boundary.
"""

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import normalize_email
from .dtos import UserInfo


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Unknown email and wrong password return the same INVALID_CREDENTIALS error
    - A hash check runs even when the user does not exist, to keep timing flat
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, email: str, password: str) -> Result[UserInfo]:
        invalid = Error("INVALID_CREDENTIALS", "Invalid email or password")

        try:
            email = normalize_email(email)
        except ValueError:
            self.hasher.verify_dummy(password)
            return Return.err(invalid)

        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                self.hasher.verify_dummy(password)
                return Return.err(invalid)

            if not self.hasher.verify(password, user.password_hash):
                return Return.err(invalid)

            return Return.ok(UserInfo.from_entity(user))
