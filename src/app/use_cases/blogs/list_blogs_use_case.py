from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import BlogInfo


class ListBlogsUseCase:
    """Use case for the public post listing, newest first, with author name and email."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[BlogInfo]]:
        async with self.uow:
            rows = await self.uow.blogs.list_with_authors()
            return Return.ok([BlogInfo.from_entity(blog, author) for blog, author in rows])
