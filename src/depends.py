import logging
from datetime import timedelta
from typing import AsyncIterator

from fastapi import Depends, Request, status
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.local_file_storage import LocalFileStorage
from src.adapter.services.log_reset_notifier import LoggingResetNotifier
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import SessionTokenCodec
from src.app.services.asset_guard import AssetLifecycleGuard
from src.app.services.file_storage import IFileStorage
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_notifier import IResetNotifier
from src.app.services.reset_token_generator import ResetTokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import ResolveIdentityUseCase, check_role
from src.app.use_cases.auth.dtos import UserInfo
from src.domain.entities import DEFAULT_AVATAR, Role

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless each connection turns them on."""
    if async_engine.dialect.name != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
enable_sqlite_foreign_keys(engine)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Process-wide, immutable after startup
password_hasher = PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
session_token_codec = SessionTokenCodec(
    ApplicationConfig.JWT_SECRET,
    ttl=timedelta(seconds=ApplicationConfig.SESSION_TTL_SECONDS),
)
reset_token_generator = ResetTokenGenerator()
reset_notifier = LoggingResetNotifier()


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_session_token_codec() -> SessionTokenCodec:
    return session_token_codec


def get_reset_token_generator() -> ResetTokenGenerator:
    return reset_token_generator


def get_reset_notifier() -> IResetNotifier:
    return reset_notifier


def get_file_storage() -> IFileStorage:
    return LocalFileStorage(ApplicationConfig.UPLOAD_DIR)


def get_asset_guard(storage: IFileStorage = Depends(get_file_storage)) -> AssetLifecycleGuard:
    return AssetLifecycleGuard(storage, placeholder=DEFAULT_AVATAR)


async def get_unit_of_work(
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AsyncIterator[UnitOfWork]:
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session, hasher)


async def get_current_user(
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    codec: SessionTokenCodec = Depends(get_session_token_codec),
) -> UserInfo:
    """
    Dependency that resolves the session cookie into the current user.

    Returns:
        Public view of the authenticated user

    Raises:
        ClientError: 401 if the cookie is missing, invalid, expired, or names
        a user that no longer exists
    """
    token = request.cookies.get(ApplicationConfig.SESSION_COOKIE_NAME)

    result = await ResolveIdentityUseCase(uow, codec).execute(token)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value


def require_roles(*roles: Role):
    """
    Build a dependency that admits only the given roles.

    Always runs after get_current_user, so a missing or bad session is a 401
    before the role is ever looked at.
    """
    allowed = frozenset(roles)

    async def dependency(current_user: UserInfo = Depends(get_current_user)) -> UserInfo:
        result = check_role(current_user, allowed)
        if result.is_err():
            logger.info(
                f"User {current_user.id} with role {current_user.role} denied; requires {sorted(r.value for r in allowed)}"
            )
            raise ClientError(result.error, status_code=status.HTTP_403_FORBIDDEN)
        return result.value

    return dependency
