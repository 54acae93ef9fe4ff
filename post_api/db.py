from collections.abc import AsyncGenerator
import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from post_api.config import DATABASE_URL


class Base(DeclarativeBase):
    pass


def same_identity(a, b) -> bool:
    """Two posts are the same entity only once both carry the same id."""
    return a.id is not None and b.id is not None and a.id == b.id


class Post(Base):
    __tablename__ = 'posts'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    # set on insert only
    created_at = Column(DateTime, default=datetime.datetime.now)

    def update_with(self, request):
        self.title = request.title
        self.content = request.content

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Post):
            return NotImplemented
        return same_identity(self, other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return (
            f'Post(id={self.id!r}, title={self.title!r}, '
            f'content={self.content!r}, created_at={self.created_at!r})'
        )


engine = create_async_engine(DATABASE_URL)
async_session_maker = async_sessionmaker(engine, expire_on_commit=False)

async def create_db_and_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        yield session
