import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.asset_guard import AssetLifecycleGuard
from src.domain.entities import DEFAULT_AVATAR


def _returns_first_arg(entity, *args, **kwargs):
    return entity


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_reset_token = AsyncMock(return_value=None)
    uow.users.list_all = AsyncMock(return_value=[])
    uow.users.create = AsyncMock(side_effect=_returns_first_arg)
    uow.users.update = AsyncMock(side_effect=_returns_first_arg)
    uow.users.delete = AsyncMock()

    uow.blogs = MagicMock()
    uow.blogs.get_by_id = AsyncMock(return_value=None)
    uow.blogs.list_with_authors = AsyncMock(return_value=[])
    uow.blogs.create = AsyncMock(side_effect=_returns_first_arg)
    uow.blogs.update = AsyncMock(side_effect=_returns_first_arg)
    uow.blogs.delete = AsyncMock()
    return uow


@pytest.fixture
def mock_storage():
    storage = MagicMock()
    storage.save = AsyncMock()
    storage.exists = AsyncMock(return_value=True)
    storage.delete = AsyncMock(return_value=True)
    return storage


@pytest.fixture
def asset_guard(mock_storage):
    return AssetLifecycleGuard(mock_storage, placeholder=DEFAULT_AVATAR)
