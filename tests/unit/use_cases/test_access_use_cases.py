"""
Unit tests for the access gate: ResolveIdentityUseCase and check_role
"""
from datetime import timedelta
from uuid import uuid4

import pytest

from src.api.utils.jwt import SessionTokenCodec
from src.app.use_cases.access import ResolveIdentityUseCase, check_role
from src.app.use_cases.auth import UserInfo
from src.domain.entities import Role, User


@pytest.fixture
def codec():
    return SessionTokenCodec("unit-secret")


@pytest.fixture
def user():
    return User(
        id=uuid4(),
        username="alice",
        email="alice@example.com",
        password_hash="hash",
        role=Role.moderator,
    )


@pytest.mark.asyncio
async def test_missing_token(mock_uow, codec):
    result = await ResolveIdentityUseCase(mock_uow, codec).execute(None)

    assert result.error.code == "UNAUTHENTICATED"
    assert result.error.reason == "no token"
    mock_uow.users.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_valid_token_resolves_principal(mock_uow, codec, user):
    mock_uow.users.get_by_id.return_value = user

    result = await ResolveIdentityUseCase(mock_uow, codec).execute(codec.issue(user.id))

    assert result.is_ok()
    assert result.value.id == user.id
    assert result.value.role == "moderator"
    mock_uow.users.get_by_id.assert_called_once_with(user.id)


@pytest.mark.asyncio
async def test_expired_and_forged_tokens_look_the_same_to_clients(mock_uow, codec, user):
    expired = SessionTokenCodec("unit-secret", ttl=timedelta(seconds=-1)).issue(user.id)
    forged = SessionTokenCodec("attacker-secret").issue(user.id)

    expired_result = await ResolveIdentityUseCase(mock_uow, codec).execute(expired)
    forged_result = await ResolveIdentityUseCase(mock_uow, codec).execute(forged)

    assert expired_result.error.code == forged_result.error.code == "UNAUTHENTICATED"
    assert expired_result.error.message == forged_result.error.message
    assert expired_result.error.reason == "TOKEN_EXPIRED"
    assert forged_result.error.reason == "INVALID_SIGNATURE"


@pytest.mark.asyncio
async def test_deleted_subject_is_unauthenticated(mock_uow, codec):
    mock_uow.users.get_by_id.return_value = None

    result = await ResolveIdentityUseCase(mock_uow, codec).execute(codec.issue(uuid4()))

    assert result.error.code == "UNAUTHENTICATED"
    assert result.error.reason == "SUBJECT_NOT_FOUND"


def principal(role: str) -> UserInfo:
    return UserInfo(id=uuid4(), username="u", email="u@example.com", avatar="a.png", role=role)


def test_role_in_allow_set_passes():
    result = check_role(principal("admin"), {Role.admin, Role.moderator})

    assert result.is_ok()


def test_role_outside_allow_set_is_forbidden():
    result = check_role(principal("user"), {Role.admin})

    assert result.error.code == "FORBIDDEN"


def test_missing_or_malformed_principal_fails_closed():
    assert check_role(None, {Role.admin}).error.code == "FORBIDDEN"
    assert check_role(principal("superuser"), {Role.admin}).error.code == "FORBIDDEN"
