from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.orm import relationship

from forum.database import Base


class User(Base):
    """
    Forum member; admins moderate posts
    """
    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(180), unique=True, index=True, nullable=False)
    hashed_password = Column("password", String(255), nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)

    # Relationships
    posts = relationship("Post", back_populates="creator")
    comments = relationship("Comment", back_populates="creator")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', is_admin={self.is_admin})>"
