from libs.result import Error, Result, Return
from src.app.services.asset_guard import AssetLifecycleGuard
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Blog
from .dtos import BlogInfo, CreateBlogCommand


class CreateBlogUseCase:
    """
    Use case for publishing a post.

    Business Rules:
    - Title, content and cover image are required
    - If the post cannot be saved, the uploaded cover image is removed
    """

    def __init__(self, uow: UnitOfWork, asset_guard: AssetLifecycleGuard):
        self.uow = uow
        self.asset_guard = asset_guard

    async def execute(self, command: CreateBlogCommand) -> Result[BlogInfo]:
        return await self.asset_guard.create(command.image, lambda: self._create(command))

    async def _create(self, command: CreateBlogCommand) -> Result[BlogInfo]:
        if not command.image:
            return Return.err(Error("VALIDATION_FAILED", "Image is required"))

        title = (command.title or "").strip()
        content = (command.content or "").strip()
        if not title or not content:
            return Return.err(Error("VALIDATION_FAILED", "Title and content are required"))

        async with self.uow:
            blog = Blog(
                title=title,
                content=content,
                image=command.image,
                author_id=command.author_id,
            )
            blog = await self.uow.blogs.create(blog)
            await self.uow.commit()

            return Return.ok(BlogInfo.from_entity(blog))
