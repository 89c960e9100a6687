# schemas/comment.py
from typing import List

from pydantic import Field

from forum.models import Comment
from forum.schemas.base import CamelModel, ResultResponse, format_timestamp
from forum.schemas.post import PostResponse


class CommentCreate(CamelModel):
    post_id: int = Field(..., gt=0)
    user_id: int = Field(..., gt=0)
    comment: str = Field(..., min_length=1, max_length=1000)


class CommentResponse(CamelModel):
    id: int
    comment: str
    created_by: str
    created_at: str

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            comment=comment.comment,
            created_by=comment.creator.email,
            created_at=format_timestamp(comment.created_at),
        )


class CommentListResponse(ResultResponse):
    post: PostResponse
    comments: List[CommentResponse]


class NewCommentResponse(ResultResponse):
    new_comment: CommentResponse
