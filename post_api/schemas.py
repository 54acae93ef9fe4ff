import datetime
from pydantic import BaseModel

from post_api.db import Post

class PostRequest(BaseModel):
    title: str
    content: str

    def to_entity(self) -> Post:
        return Post(title=self.title, content=self.content)

class PostResponse(BaseModel):
    id: int
    title: str
    content: str
    timestamp: datetime.datetime

    @classmethod
    def from_entity(cls, post: Post) -> 'PostResponse':
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            timestamp=post.created_at,
        )

class ApiError(BaseModel):
    status: int
    message: str
