# Import all models to ensure they're registered with SQLAlchemy
from .user import User
from .post import Post, PostStatus
from .comment import Comment

# Make models available for import
__all__ = [
    "User",
    "Post",
    "PostStatus",
    "Comment",
]
