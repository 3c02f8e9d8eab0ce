import logging
import secrets
import time
from pathlib import Path

from fastapi.concurrency import run_in_threadpool

from src.app.services.file_storage import IFileStorage, StoredFile

logger = logging.getLogger(__name__)


class LocalFileStorage(IFileStorage):
    """Stores uploads as flat files inside a single directory; disk calls run off the event loop"""

    def __init__(self, root: str):
        self.root = Path(root)

    def _path_for(self, filename: str) -> Path:
        path = (self.root / filename).resolve()
        if path.parent != self.root.resolve():
            raise ValueError(f"Refusing to touch a file outside the upload directory: {filename!r}")
        return path

    @staticmethod
    def _generate_name(field_name: str, original_name: str) -> str:
        ext = Path(original_name or "").suffix.lstrip(".").lower() or "bin"
        unique_suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
        return f"{field_name}-{unique_suffix}.{ext}"

    def _write(self, path: Path, data: bytes) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    @staticmethod
    def _unlink(path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True

    async def save(self, field_name: str, original_name: str, data: bytes) -> StoredFile:
        filename = self._generate_name(field_name, original_name)
        path = self._path_for(filename)
        await run_in_threadpool(self._write, path, data)
        logger.debug(f"Stored upload {filename} ({len(data)} bytes)")
        return StoredFile(filename=filename, path=str(path))

    async def exists(self, filename: str) -> bool:
        return await run_in_threadpool(self._path_for(filename).is_file)

    async def delete(self, filename: str) -> bool:
        removed = await run_in_threadpool(self._unlink, self._path_for(filename))
        if removed:
            logger.info(f"Removed asset {filename}")
        return removed
