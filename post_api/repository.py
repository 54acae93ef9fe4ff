from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from post_api.db import Post, get_async_session


class PostRepository:
    """Entity store for posts, one instance per request session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, post_id: int) -> Post | None:
        result = await self.session.execute(select(Post).where(Post.id == post_id))
        return result.scalars().first()

    async def save(self, post: Post) -> Post:
        self.session.add(post)
        await self.session.commit()
        await self.session.refresh(post)
        return post

    async def delete(self, post: Post) -> None:
        await self.session.delete(post)
        await self.session.commit()


async def get_post_repository(session: AsyncSession = Depends(get_async_session)) -> PostRepository:
    return PostRepository(session)
