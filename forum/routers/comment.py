# routers/comment.py
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from forum.database import get_db
from forum.schemas.comment import CommentCreate, CommentListResponse, CommentResponse, NewCommentResponse
from forum.schemas.post import PostResponse
from forum.utils import comment_service

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("", response_model=CommentListResponse)
def get_comments(
    db: Session = Depends(get_db),
    post_id: int = Query(..., alias="postId", gt=0),
):
    """A post with its comments, newest first"""
    post, comments = comment_service.list_comments(db, post_id)
    return CommentListResponse(
        post=PostResponse.from_post(post),
        comments=[CommentResponse.from_comment(comment) for comment in comments],
    )


@router.post("", response_model=NewCommentResponse, status_code=status.HTTP_201_CREATED)
def add_comment(comment_data: CommentCreate, db: Session = Depends(get_db)):
    comment = comment_service.add_comment(
        db,
        post_id=comment_data.post_id,
        user_id=comment_data.user_id,
        text=comment_data.comment,
    )
    return NewCommentResponse(new_comment=CommentResponse.from_comment(comment))
