import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from blog_api.core.errors import DuplicateKeyError
from blog_api.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """
    Sole access path to user records.

    Username uniqueness is enforced by the unique index on users.username,
    so two concurrent inserts for the same name cannot both commit.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self.db.get(User, user_id)

    def insert(self, user: User) -> User:
        """Persist a new user, raising DuplicateKeyError on a username collision"""
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Another transaction won the race for this username
            self.db.rollback()
            logger.info("Rejected duplicate username on insert: %s", user.username)
            raise DuplicateKeyError("username", user.username)
        # Load generated fields (created_at) from the database
        self.db.refresh(user)
        return user
