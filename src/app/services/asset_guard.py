"""
Asset Lifecycle Guard

Keeps uploaded files consistent with the records that reference them.
Database and filesystem are not updated atomically, so every operation
persists the record first and only then touches files:

- create:  persist; on failure remove the freshly uploaded file
- swap:    persist the new reference; on success remove the old file,
           on failure remove the new one (exactly one of the two)
- release: delete the record; only on success remove its file

The placeholder asset is shared by every record and is never removed.
File removal is best-effort: errors are logged and never replace the
outcome of the database operation.
"""

import logging
from typing import Awaitable, Callable, Optional, TypeVar

from libs.result import Result
from src.app.services.file_storage import IFileStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AssetLifecycleGuard:
    def __init__(self, storage: IFileStorage, placeholder: str):
        self.storage = storage
        self.placeholder = placeholder

    async def discard(self, asset: Optional[str]) -> None:
        """Remove an asset file, swallowing and logging any failure."""
        if not asset or asset == self.placeholder:
            return
        try:
            removed = await self.storage.delete(asset)
        except Exception:
            logger.exception(f"Failed to remove asset {asset!r}")
            return
        if not removed:
            logger.warning(f"Asset {asset!r} was already missing during cleanup")

    async def create(
        self,
        new_asset: Optional[str],
        persist: Callable[[], Awaitable[Result[T]]],
    ) -> Result[T]:
        try:
            result = await persist()
        except Exception:
            await self.discard(new_asset)
            raise
        if result.is_err():
            await self.discard(new_asset)
        return result

    async def swap(
        self,
        old_asset: Optional[str],
        new_asset: Optional[str],
        persist: Callable[[], Awaitable[Result[T]]],
    ) -> Result[T]:
        try:
            result = await persist()
        except Exception:
            await self.discard(new_asset)
            raise
        if result.is_err():
            await self.discard(new_asset)
        elif new_asset and old_asset != new_asset:
            await self.discard(old_asset)
        return result

    async def release(
        self,
        asset: Optional[str],
        delete: Callable[[], Awaitable[Result[T]]],
    ) -> Result[T]:
        result = await delete()
        if result.is_ok():
            await self.discard(asset)
        return result
