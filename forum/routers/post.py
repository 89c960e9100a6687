# routers/post.py
import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from forum.database import get_db
from forum.models import PostStatus
from forum.schemas.base import ResultResponse
from forum.schemas.post import PostCreate, PostListResponse
from forum.utils import moderation_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=PostListResponse)
def get_posts(db: Session = Depends(get_db)):
    """Approved posts for everyone, newest first"""
    return PostListResponse.from_posts(moderation_service.list_public(db))


@router.post("", response_model=ResultResponse, status_code=status.HTTP_201_CREATED)
def create_post(post_data: PostCreate, db: Session = Depends(get_db)):
    """Create a post; it waits for moderation unless the creator is an admin"""
    post = moderation_service.create_post(
        db,
        user_id=post_data.user_id,
        title=post_data.title,
        content=post_data.content,
    )
    if post_data.is_admin and not post.creator.is_admin:
        logger.warning(f"User {post_data.user_id} claimed admin rights on post creation")
    return ResultResponse()


@router.get("/manage", response_model=PostListResponse)
def get_posts_for_delete(
    db: Session = Depends(get_db),
    user_id: int = Query(..., alias="userId", gt=0, description="Caller ID"),
    is_admin: bool = Query(..., alias="isAdmin", description="Admins see every post"),
):
    """Posts the caller may delete"""
    return PostListResponse.from_posts(moderation_service.list_for_owner(db, user_id, is_admin))


@router.get("/pending", response_model=PostListResponse)
def get_pending_posts(
    db: Session = Depends(get_db),
    user_id: int = Query(..., alias="userId", gt=0, description="Caller ID"),
    is_admin: bool = Query(..., alias="isAdmin", description="Admins see every pending post"),
):
    """Posts awaiting moderation"""
    return PostListResponse.from_posts(moderation_service.list_pending(db, user_id, is_admin))


@router.delete("", response_model=ResultResponse)
def delete_post(
    db: Session = Depends(get_db),
    post_id: int = Query(..., alias="postId", gt=0),
):
    """Delete a post and its comments"""
    moderation_service.delete_post(db, post_id)
    return ResultResponse()


@router.patch("", response_model=ResultResponse)
def update_post_status(
    db: Session = Depends(get_db),
    post_id: int = Query(..., alias="postId", gt=0),
    new_status: PostStatus = Query(..., alias="status", description="PENDING, APPROVED or REJECTED"),
):
    """Approve or reject a post"""
    moderation_service.set_status(db, post_id, new_status)
    return ResultResponse()
