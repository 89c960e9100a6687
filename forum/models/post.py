from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey, Index
from sqlalchemy.orm import relationship
import enum

from forum.database import Base


class PostStatus(str, enum.Enum):
    """Moderation state of a post"""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Post(Base):
    """
    Forum post awaiting or past moderation
    """
    __tablename__ = "post"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(String(1000), nullable=True)
    status = Column(Enum(PostStatus, name="post_status"), default=PostStatus.PENDING, nullable=False)

    # Creator relationship
    created_by_id = Column(Integer, ForeignKey("user.id"), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    creator = relationship("User", back_populates="posts")
    comments = relationship("Comment", back_populates="post", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Post(id={self.id}, title='{self.title[:30]}...', status='{self.status}')>"


# Database indexes for the moderation listings
Index("idx_post_created_by_id", Post.created_by_id)
Index("idx_post_status", Post.status)
Index("idx_post_created_at", Post.created_at)
