from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from blog_api.core.database import Base
from blog_api.models.user import generate_id


class Post(Base):
    __tablename__ = "posts"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    # Card background shown by the client, picked at creation
    color = Column(String(7), nullable=False)
    # Set once from the creator's identity
    author_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    # Timestamps are written by the service so updates always refresh them
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    author = relationship("User", backref="posts")
    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Comment.created_at",
    )
