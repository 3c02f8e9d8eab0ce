"""
Unit tests for DeleteUserUseCase and ListUsersUseCase
"""
from uuid import uuid4

import pytest

from src.app.use_cases.users import DeleteUserUseCase, ListUsersUseCase
from src.domain.entities import DEFAULT_AVATAR, Role, User


def make_user(**overrides):
    fields = dict(
        id=uuid4(),
        username="alice",
        email="alice@example.com",
        password_hash="hash",
        role=Role.user,
    )
    fields.update(overrides)
    return User(**fields)


@pytest.mark.asyncio
async def test_delete_removes_record_then_avatar(mock_uow, asset_guard, mock_storage):
    user = make_user(avatar="profilePicture-1.png")
    mock_uow.users.get_by_id.return_value = user

    result = await DeleteUserUseCase(mock_uow, asset_guard).execute(user.id)

    assert result.is_ok()
    mock_uow.users.delete.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()
    mock_storage.delete.assert_awaited_once_with("profilePicture-1.png")


@pytest.mark.asyncio
async def test_delete_keeps_placeholder(mock_uow, asset_guard, mock_storage):
    user = make_user(avatar=DEFAULT_AVATAR)
    mock_uow.users.get_by_id.return_value = user

    await DeleteUserUseCase(mock_uow, asset_guard).execute(user.id)

    mock_storage.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_unknown_user(mock_uow, asset_guard):
    result = await DeleteUserUseCase(mock_uow, asset_guard).execute(uuid4())

    assert result.error.code == "NOT_FOUND"
    mock_uow.users.delete.assert_not_called()


@pytest.mark.asyncio
async def test_failed_delete_keeps_avatar(mock_uow, asset_guard, mock_storage):
    user = make_user(avatar="profilePicture-1.png")
    mock_uow.users.get_by_id.return_value = user
    mock_uow.commit.side_effect = RuntimeError("db down")

    with pytest.raises(RuntimeError):
        await DeleteUserUseCase(mock_uow, asset_guard).execute(user.id)

    mock_storage.delete.assert_not_called()


@pytest.mark.asyncio
async def test_list_users_exposes_public_fields_only(mock_uow):
    mock_uow.users.list_all.return_value = [
        make_user(),
        make_user(username="root", email="root@example.com", role=Role.admin),
    ]

    result = await ListUsersUseCase(mock_uow).execute()

    assert result.is_ok()
    assert [u.username for u in result.value] == ["alice", "root"]
    for user in result.value:
        assert set(user.model_dump()) == {"id", "username", "email", "avatar", "role"}
