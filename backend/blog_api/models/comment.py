from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from blog_api.core.database import Base
from blog_api.models.user import generate_id

COMMENT_MAX_LENGTH = 250


class Comment(Base):
    __tablename__ = "comments"

    id = Column(String(36), primary_key=True, default=generate_id)
    body = Column(String(COMMENT_MAX_LENGTH), nullable=False)
    post_id = Column(String(36), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    author_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    post = relationship("Post", back_populates="comments")
    author = relationship("User", backref="comments")
