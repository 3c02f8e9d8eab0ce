from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.asset_guard import AssetLifecycleGuard
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Blog


class DeleteBlogUseCase:
    """Use case for removing a post. The cover image goes only after the row is gone."""

    def __init__(self, uow: UnitOfWork, asset_guard: AssetLifecycleGuard):
        self.uow = uow
        self.asset_guard = asset_guard

    async def execute(self, blog_id: UUID) -> Result[None]:
        async with self.uow:
            blog = await self.uow.blogs.get_by_id(blog_id)
            if blog is None:
                return Return.err(Error("NOT_FOUND", "Blog not found"))

            return await self.asset_guard.release(blog.image, lambda: self._delete(blog))

    async def _delete(self, blog: Blog) -> Result[None]:
        await self.uow.blogs.delete(blog)
        await self.uow.commit()
        return Return.ok(None)
