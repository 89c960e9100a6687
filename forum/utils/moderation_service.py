"""
Moderation engine for forum posts.

Owns the post lifecycle: the initial status chosen at creation, status
changes made by moderation actions, the role-scoped listings and the
cascading delete. Every function takes the caller's database session;
writes run inside a single transaction that is rolled back on failure.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from forum.database import transaction
from forum.models import Post, PostStatus, User
from forum.utils.errors import ForumError

logger = logging.getLogger(__name__)


def initial_status(creator: User) -> PostStatus:
    """Admins publish directly, everyone else waits for moderation"""
    return PostStatus.APPROVED if creator.is_admin else PostStatus.PENDING


def _posts_query(db: Session):
    return db.query(Post).options(joinedload(Post.creator))


def _newest_first(query) -> List[Post]:
    return query.order_by(Post.created_at.desc()).all()


def get_post(db: Session, post_id: int) -> Post:
    """Get a post by ID or raise not found"""
    post = _posts_query(db).filter(Post.id == post_id).first()
    if not post:
        logger.warning(f"Post {post_id} not found")
        raise ForumError.not_found("Post")
    return post


def create_post(db: Session, user_id: int, title: str, content: Optional[str] = None) -> Post:
    """
    Create a post for an existing user.

    The initial status comes from the stored user's admin flag.
    """
    creator = db.query(User).filter(User.id == user_id).first()
    if not creator:
        logger.warning(f"User {user_id} not found")
        raise ForumError.not_found("User")

    post = Post(
        title=title,
        content=content,
        status=initial_status(creator),
        creator=creator,
        created_at=datetime.now(timezone.utc),
    )
    with transaction(db):
        db.add(post)
        db.flush()
    db.refresh(post)

    logger.info(f"Post {post.id} created by user {user_id} as {post.status.value}")
    return post


def list_public(db: Session) -> List[Post]:
    """Approved posts, newest first"""
    return _newest_first(_posts_query(db).filter(Post.status == PostStatus.APPROVED))


def list_for_owner(db: Session, user_id: int, is_admin: bool) -> List[Post]:
    """Posts the caller may manage: all of them for admins, their own otherwise"""
    query = _posts_query(db)
    if not is_admin:
        query = query.filter(Post.created_by_id == user_id)
    return _newest_first(query)


def list_pending(db: Session, user_id: int, is_admin: bool) -> List[Post]:
    """Posts awaiting moderation, scoped like list_for_owner"""
    query = _posts_query(db).filter(Post.status == PostStatus.PENDING)
    if not is_admin:
        query = query.filter(Post.created_by_id == user_id)
    return _newest_first(query)


def set_status(db: Session, post_id: int, new_status: PostStatus) -> Post:
    """
    Overwrite the moderation status of a post.

    Any status may follow any other; there is no transition graph.
    Callers are not checked for the admin flag here.
    """
    post = get_post(db, post_id)
    previous = post.status

    with transaction(db):
        post.status = PostStatus(new_status)

    logger.info(f"Post {post_id} status changed from {previous.value} to {post.status.value}")
    return post


def delete_post(db: Session, post_id: int) -> int:
    """
    Delete a post together with its comments.

    Returns the number of comments removed.
    """
    post = get_post(db, post_id)

    with transaction(db):
        comments = list(post.comments)
        for comment in comments:
            db.delete(comment)
        db.delete(post)

    logger.info(f"Post {post_id} deleted with {len(comments)} comments")
    return len(comments)
