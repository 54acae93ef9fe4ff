import logging

from fastapi import Depends

from post_api.db import Post
from post_api.repository import PostRepository, get_post_repository
from post_api.results import NotFound, Ok
from post_api.schemas import PostRequest

logger = logging.getLogger(__name__)


class PostService:

    def __init__(self, repository: PostRepository):
        self.repository = repository

    async def get(self, post_id: int) -> Ok[Post] | NotFound:
        return await self._find(post_id)

    async def create(self, request: PostRequest) -> Ok[Post]:
        post = await self.repository.save(request.to_entity())
        logger.info('Created post id=%s', post.id)
        return Ok(post)

    async def update(self, post_id: int, request: PostRequest) -> Ok[Post] | NotFound:
        found = await self._find(post_id)
        if not isinstance(found, Ok):
            return found
        post = found.value
        post.update_with(request)
        post = await self.repository.save(post)
        logger.info('Updated post id=%s', post.id)
        return Ok(post)

    async def delete(self, post_id: int) -> Ok[None] | NotFound:
        found = await self._find(post_id)
        if not isinstance(found, Ok):
            return found
        await self.repository.delete(found.value)
        logger.info('Deleted post id=%s', post_id)
        return Ok(None)

    async def _find(self, post_id: int) -> Ok[Post] | NotFound:
        post = await self.repository.find_by_id(post_id)
        if post is None:
            logger.info('Post id=%s not found', post_id)
            return NotFound(post_id)
        return Ok(post)


async def get_post_service(repository: PostRepository = Depends(get_post_repository)) -> PostService:
    return PostService(repository)
