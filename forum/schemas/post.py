# schemas/post.py
from typing import List, Optional

from pydantic import Field, StrictBool

from forum.models import Post, PostStatus
from forum.schemas.base import CamelModel, ResultResponse, format_timestamp


class PostCreate(CamelModel):
    user_id: int = Field(..., gt=0, description="Creator ID")
    is_admin: StrictBool = Field(..., description="Whether the creator claims admin rights")
    title: str = Field(..., min_length=1, max_length=255, description="Post title")
    content: Optional[str] = Field(None, max_length=1000, description="Post content")


class PostResponse(CamelModel):
    id: int
    title: str
    content: Optional[str]
    status: PostStatus
    created_by_id: int
    created_by: str
    created_at: str

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            status=post.status,
            created_by_id=post.created_by_id,
            created_by=post.creator.email,
            created_at=format_timestamp(post.created_at),
        )


class PostListResponse(ResultResponse):
    posts: List[PostResponse]

    @classmethod
    def from_posts(cls, posts: List[Post]) -> "PostListResponse":
        return cls(posts=[PostResponse.from_post(post) for post in posts])
