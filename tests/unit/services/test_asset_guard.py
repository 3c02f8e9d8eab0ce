"""
Unit tests for AssetLifecycleGuard

Covers the create, swap and release protocols and best-effort cleanup.
"""
import pytest
from unittest.mock import AsyncMock

from libs.result import Error, Return
from src.domain.entities import DEFAULT_AVATAR


async def ok():
    return Return.ok("saved")


async def fail():
    return Return.err(Error("ALREADY_EXISTS", "duplicate"))


async def explode():
    raise RuntimeError("database went away")


@pytest.mark.asyncio
async def test_create_success_keeps_new_file(asset_guard, mock_storage):
    result = await asset_guard.create("new.png", ok)

    assert result.is_ok()
    mock_storage.delete.assert_not_called()


@pytest.mark.asyncio
async def test_create_error_result_removes_new_file(asset_guard, mock_storage):
    result = await asset_guard.create("new.png", fail)

    assert result.is_err()
    assert result.error.code == "ALREADY_EXISTS"
    mock_storage.delete.assert_awaited_once_with("new.png")


@pytest.mark.asyncio
async def test_create_exception_removes_new_file_and_reraises(asset_guard, mock_storage):
    with pytest.raises(RuntimeError):
        await asset_guard.create("new.png", explode)

    mock_storage.delete.assert_awaited_once_with("new.png")


@pytest.mark.asyncio
async def test_create_without_file_touches_nothing(asset_guard, mock_storage):
    await asset_guard.create(None, fail)

    mock_storage.delete.assert_not_called()


@pytest.mark.asyncio
async def test_swap_success_removes_only_old_file(asset_guard, mock_storage):
    result = await asset_guard.swap("old.png", "new.png", ok)

    assert result.is_ok()
    mock_storage.delete.assert_awaited_once_with("old.png")


@pytest.mark.asyncio
async def test_swap_failure_removes_only_new_file(asset_guard, mock_storage):
    result = await asset_guard.swap("old.png", "new.png", fail)

    assert result.is_err()
    mock_storage.delete.assert_awaited_once_with("new.png")


@pytest.mark.asyncio
async def test_swap_exception_removes_new_file(asset_guard, mock_storage):
    with pytest.raises(RuntimeError):
        await asset_guard.swap("old.png", "new.png", explode)

    mock_storage.delete.assert_awaited_once_with("new.png")


@pytest.mark.asyncio
async def test_swap_never_removes_placeholder(asset_guard, mock_storage):
    result = await asset_guard.swap(DEFAULT_AVATAR, "new.png", ok)

    assert result.is_ok()
    mock_storage.delete.assert_not_called()


@pytest.mark.asyncio
async def test_swap_without_new_file_touches_nothing(asset_guard, mock_storage):
    await asset_guard.swap("old.png", None, ok)
    await asset_guard.swap("old.png", None, fail)

    mock_storage.delete.assert_not_called()


@pytest.mark.asyncio
async def test_release_removes_file_after_successful_delete(asset_guard, mock_storage):
    calls = []

    async def delete_record():
        calls.append("record")
        return Return.ok(None)

    async def delete_file(name):
        calls.append(f"file:{name}")
        return True

    mock_storage.delete.side_effect = delete_file

    result = await asset_guard.release("cover.png", delete_record)

    assert result.is_ok()
    assert calls == ["record", "file:cover.png"]


@pytest.mark.asyncio
async def test_release_keeps_file_when_delete_fails(asset_guard, mock_storage):
    result = await asset_guard.release("cover.png", fail)

    assert result.is_err()
    mock_storage.delete.assert_not_called()


@pytest.mark.asyncio
async def test_cleanup_failure_does_not_mask_outcome(asset_guard, mock_storage):
    mock_storage.delete = AsyncMock(side_effect=OSError("permission denied"))

    result = await asset_guard.swap("old.png", "new.png", ok)

    assert result.is_ok()
    assert result.value == "saved"


@pytest.mark.asyncio
async def test_missing_file_during_cleanup_is_not_an_error(asset_guard, mock_storage):
    mock_storage.delete.return_value = False

    result = await asset_guard.create("gone.png", fail)

    assert result.error.code == "ALREADY_EXISTS"
