import uuid
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from blog_api.core.database import Base


def generate_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """
    User model representing registered authors.

    Passwords are stored as bcrypt hashes (never plaintext).
    """
    __tablename__ = "users"

    # Opaque identifier, generated on insert and never changed
    id = Column(String(36), primary_key=True, default=generate_id)
    # Unique constraint is what makes concurrent registrations safe
    username = Column(String(64), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
