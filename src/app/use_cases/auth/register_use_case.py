from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from src.app.services.asset_guard import AssetLifecycleGuard
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import DEFAULT_AVATAR, User, normalize_email, normalize_username
from .dtos import RegisterCommand, UserInfo


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (avatar already stored by the upload layer)
    - Output: Result[UserInfo]

    Business Logic:
    1. Normalize username (trim) and email (trim + lowercase), validate both
    2. Reject an email that is already registered (ALREADY_EXISTS)
    3. Persist the user; the repository hashes the plaintext password once
    4. A duplicate username caught by the unique index is also ALREADY_EXISTS
    5. Any failure removes the uploaded avatar so no orphan file remains
    """

    def __init__(self, uow: UnitOfWork, asset_guard: AssetLifecycleGuard):
        self.uow = uow
        self.asset_guard = asset_guard

    async def execute(self, command: RegisterCommand) -> Result[UserInfo]:
        return await self.asset_guard.create(
            command.avatar, lambda: self._register(command)
        )

    async def _register(self, command: RegisterCommand) -> Result[UserInfo]:
        try:
            username = normalize_username(command.username)
            email = normalize_email(command.email)
        except ValueError as exc:
            return Return.err(Error("VALIDATION_FAILED", str(exc)))

        if not command.password:
            return Return.err(Error("VALIDATION_FAILED", "Password is required"))

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(Error("ALREADY_EXISTS", "User already exists"))

            user = User(
                username=username,
                email=email,
                password_hash="",
                avatar=command.avatar or DEFAULT_AVATAR,
            )
            try:
                user = await self.uow.users.create(user, password=command.password)
                await self.uow.commit()
            except IntegrityError:
                return Return.err(
                    Error("ALREADY_EXISTS", "Username or email already taken")
                )

            return Return.ok(UserInfo.from_entity(user))
