from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.blog_repository import BlogRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession, hasher: PasswordHasher):
        self.session = session
        self.hasher = hasher

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session, self.hasher)
        self.blogs = BlogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
