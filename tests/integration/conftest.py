from datetime import timedelta
from typing import Dict, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import SessionTokenCodec
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_notifier import IResetNotifier
from src.depends import (
    enable_sqlite_foreign_keys,
    get_password_hasher,
    get_reset_notifier,
    get_session_token_codec,
    get_unit_of_work,
)

TEST_SECRET = "integration-test-secret"


class RecordingResetNotifier(IResetNotifier):
    """Keeps every PIN it is asked to deliver, keyed by email"""

    def __init__(self):
        self.sent: Dict[str, List[str]] = {}

    async def send_reset_pin(self, email: str, pin: str) -> None:
        self.sent.setdefault(email, []).append(pin)

    def last_pin(self, email: str) -> str:
        return self.sent[email][-1]


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    path.mkdir()
    monkeypatch.setattr(ApplicationConfig, "UPLOAD_DIR", str(path))
    return path


@pytest.fixture
def hasher():
    # Lowest cost bcrypt accepts, tests only
    return PasswordHasher(rounds=4)


@pytest.fixture
def codec():
    return SessionTokenCodec(TEST_SECRET, ttl=timedelta(hours=1))


@pytest.fixture
def notifier():
    return RecordingResetNotifier()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, upload_dir, hasher, codec, notifier, monkeypatch):
    from src.api.app import create_app

    monkeypatch.setattr(ApplicationConfig, "AUTO_CREATE_TABLES", False)
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session, hasher)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    app.dependency_overrides[get_session_token_codec] = lambda: codec
    app.dependency_overrides[get_reset_notifier] = lambda: notifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
