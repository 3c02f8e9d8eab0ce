from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from pydantic import BaseModel

from src.api.error import ClientError, ServerError
from src.api.utils.upload import store_upload
from src.app.services.asset_guard import AssetLifecycleGuard
from src.app.services.file_storage import IFileStorage
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import UserInfo
from src.app.use_cases.blogs import (
    BlogInfo,
    BlogPatch,
    CreateBlogCommand,
    CreateBlogUseCase,
    DeleteBlogUseCase,
    ListBlogsUseCase,
    UpdateBlogUseCase,
)
from src.depends import get_asset_guard, get_file_storage, get_unit_of_work, require_roles
from src.domain.entities import Role

router = APIRouter(prefix="/blogs", tags=["Blogs"])

IMAGE_FIELD = "image"

require_editor = require_roles(Role.admin, Role.moderator)


class MessageResponse(BaseModel):
    message: str


@router.get("", status_code=status.HTTP_200_OK, response_model=List[BlogInfo])
async def list_blogs(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Public listing of all posts with their authors."""
    result = await ListBlogsUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=BlogInfo)
async def create_blog(
    title: str = Form(...),
    content: str = Form(...),
    image: Optional[UploadFile] = File(None),
    current_user: UserInfo = Depends(require_editor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
    asset_guard: AssetLifecycleGuard = Depends(get_asset_guard),
):
    """
    Create Post (admin, moderator)

    Raises:
        - 400 Bad Request: Missing image, empty title/content, or upload rejected
        - 401 Unauthorized / 403 Forbidden: Access gate
    """
    stored = await store_upload(image, IMAGE_FIELD, storage)

    command = CreateBlogCommand(
        title=title,
        content=content,
        image=stored.filename if stored else None,
        author_id=current_user.id,
    )
    result = await CreateBlogUseCase(uow, asset_guard).execute(command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.put("/{blog_id}", status_code=status.HTTP_200_OK, response_model=BlogInfo)
async def update_blog(
    blog_id: UUID,
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    current_user: UserInfo = Depends(require_editor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
    asset_guard: AssetLifecycleGuard = Depends(get_asset_guard),
):
    """
    Update Post (admin, moderator)

    Only non-empty fields are applied; a new image replaces the old file
    once the update is saved.

    Raises:
        - 400 Bad Request: Upload rejected
        - 404 Not Found: No such post
    """
    stored = await store_upload(image, IMAGE_FIELD, storage)

    fields = {
        "title": title,
        "content": content,
        "image": stored.filename if stored else None,
    }
    patch = BlogPatch(**{name: value for name, value in fields.items() if value})

    result = await UpdateBlogUseCase(uow, asset_guard).execute(blog_id, patch)

    if result.is_err():
        error = result.error
        if error.code == "NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.delete("/{blog_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_blog(
    blog_id: UUID,
    current_user: UserInfo = Depends(require_editor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    asset_guard: AssetLifecycleGuard = Depends(get_asset_guard),
):
    """
    Delete Post (admin, moderator)

    Raises:
        - 404 Not Found: No such post
    """
    result = await DeleteBlogUseCase(uow, asset_guard).execute(blog_id)

    if result.is_err():
        error = result.error
        if error.code == "NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return MessageResponse(message="Blog deleted successfully")
