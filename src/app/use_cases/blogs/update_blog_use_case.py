from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.asset_guard import AssetLifecycleGuard
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Blog
from .dtos import BlogInfo, BlogPatch


class UpdateBlogUseCase:
    """
    Use case for editing a post.

    Business Rules:
    - Only fields present on the patch change
    - Unknown post is NOT_FOUND and the uploaded image is removed
    - A new cover image replaces the old file only after the write succeeds
    """

    def __init__(self, uow: UnitOfWork, asset_guard: AssetLifecycleGuard):
        self.uow = uow
        self.asset_guard = asset_guard

    async def execute(self, blog_id: UUID, patch: BlogPatch) -> Result[BlogInfo]:
        async with self.uow:
            blog = await self.uow.blogs.get_by_id(blog_id)
            if blog is None:
                await self.asset_guard.discard(patch.image)
                return Return.err(Error("NOT_FOUND", "Blog not found"))

            return await self.asset_guard.swap(
                blog.image, patch.image, lambda: self._apply(blog, patch)
            )

    async def _apply(self, blog: Blog, patch: BlogPatch) -> Result[BlogInfo]:
        changes = patch.changes()

        for field in ("title", "content"):
            if field in changes:
                changes[field] = changes[field].strip()
                if not changes[field]:
                    return Return.err(
                        Error("VALIDATION_FAILED", f"{field.capitalize()} cannot be empty")
                    )

        for field, value in changes.items():
            setattr(blog, field, value)

        blog = await self.uow.blogs.update(blog)
        await self.uow.commit()

        return Return.ok(BlogInfo.from_entity(blog))
