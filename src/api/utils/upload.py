"""
Upload handling for multipart file fields.

Validates the upload before anything touches disk, then hands the bytes
to the file storage. Everything after that point is the asset guard's job.
"""

from typing import Optional

from fastapi import UploadFile, status

from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError
from src.app.services.file_storage import IFileStorage, StoredFile


async def store_upload(
    upload: Optional[UploadFile], field_name: str, storage: IFileStorage
) -> Optional[StoredFile]:
    """
    Store an optional uploaded image.

    Returns:
        The stored file, or None when the field was not sent

    Raises:
        ClientError: 400 for non-image content, 413 for files over MAX_UPLOAD_BYTES
    """
    if upload is None or not upload.filename:
        return None

    content_type = upload.content_type or ""
    if not content_type.startswith("image/"):
        raise ClientError(
            Error("INVALID_FILE", "Only image uploads are allowed"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    max_bytes = ApplicationConfig.MAX_UPLOAD_BYTES
    data = await upload.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise ClientError(
            Error("FILE_TOO_LARGE", f"File exceeds the {max_bytes} byte limit"),
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        )

    return await storage.save(field_name, upload.filename, data)
