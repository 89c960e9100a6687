from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from forum.database import Base


class Comment(Base):
    """
    Comment attached to a post
    """
    __tablename__ = "comment"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("post.id"), nullable=False)
    created_by_id = Column(Integer, ForeignKey("user.id"), nullable=False)
    comment = Column(String(1000), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    post = relationship("Post", back_populates="comments")
    creator = relationship("User", back_populates="comments")

    def __repr__(self):
        return f"<Comment(id={self.id}, post_id={self.post_id})>"


Index("idx_comment_post_id", Comment.post_id)
Index("idx_comment_created_by_id", Comment.created_by_id)
