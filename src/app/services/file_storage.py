from abc import ABC, abstractmethod

from pydantic import BaseModel


class StoredFile(BaseModel):
    """A file the upload layer has already written to storage"""

    filename: str
    path: str


class IFileStorage(ABC):
    """Storage for uploaded assets, addressed by filename"""

    @abstractmethod
    async def save(self, field_name: str, original_name: str, data: bytes) -> StoredFile:
        """Write a new file under a generated unique name"""
        pass

    @abstractmethod
    async def exists(self, filename: str) -> bool:
        """Whether a file with this name is currently stored"""
        pass

    @abstractmethod
    async def delete(self, filename: str) -> bool:
        """Remove a file. Returns False if it was already gone."""
        pass
