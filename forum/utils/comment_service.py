import logging
from datetime import datetime, timezone
from typing import List, Tuple

from sqlalchemy.orm import Session, joinedload

from forum.database import transaction
from forum.models import Comment, Post, User
from forum.utils.errors import ForumError
from forum.utils.moderation_service import get_post

logger = logging.getLogger(__name__)


def list_comments(db: Session, post_id: int) -> Tuple[Post, List[Comment]]:
    """Return a post with its comments, newest first"""
    post = get_post(db, post_id)
    comments = (
        db.query(Comment)
        .options(joinedload(Comment.creator))
        .filter(Comment.post_id == post.id)
        .order_by(Comment.created_at.desc())
        .all()
    )
    return post, comments


def add_comment(db: Session, post_id: int, user_id: int, text: str) -> Comment:
    """Attach a comment from an existing user to an existing post"""
    post = get_post(db, post_id)
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        logger.warning(f"User {user_id} not found")
        raise ForumError.not_found("User")

    if not text:
        raise ForumError.invalid("Comment is missing or invalid!")

    comment = Comment(
        post=post,
        creator=user,
        comment=text,
        created_at=datetime.now(timezone.utc),
    )
    with transaction(db):
        db.add(comment)
        db.flush()
    db.refresh(comment)

    logger.info(f"Comment {comment.id} added to post {post_id} by user {user_id}")
    return comment
