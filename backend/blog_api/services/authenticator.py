import logging
from typing import Optional
from passlib.context import CryptContext
from blog_api.core.config import Settings, settings
from blog_api.core.errors import ConflictError, DuplicateKeyError, UnauthorizedError
from blog_api.core.security import create_access_token, get_password_hash, pwd_context, verify_password
from blog_api.models.user import User
from blog_api.repositories.credential_store import CredentialStore
from blog_api.services.validation import raise_for_errors, validate_registration

logger = logging.getLogger(__name__)

# Same text for unknown user and wrong password so callers cannot probe usernames
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"
USERNAME_TAKEN_MESSAGE = "Username already taken"


class Authenticator:
    """Creates accounts and exchanges credentials for session tokens."""

    def __init__(self, store: CredentialStore,
                 password_context: Optional[CryptContext] = None,
                 config: Optional[Settings] = None):
        self.store = store
        self.password_context = password_context or pwd_context
        self.config = config or settings

    def register(self, username: str, password: str) -> User:
        """Validate input, hash the password and store a new user"""
        raise_for_errors(validate_registration(username, password))

        # Fast path for the common case; the unique index still decides races
        if self.store.find_by_username(username) is not None:
            raise ConflictError(USERNAME_TAKEN_MESSAGE)

        user = User(
            username=username,
            hashed_password=get_password_hash(password, self.password_context),
        )
        try:
            user = self.store.insert(user)
        except DuplicateKeyError:
            raise ConflictError(USERNAME_TAKEN_MESSAGE)

        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return user

    def login(self, username: str, password: str) -> str:
        """Return a signed access token for valid credentials"""
        user = self.store.find_by_username(username) if username else None

        if user is None:
            # Burn a hash comparison anyway so response time matches the
            # wrong-password path
            self.password_context.dummy_verify()
            logger.info("Login failed for unknown username")
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        if not verify_password(password or "", user.hashed_password, self.password_context):
            logger.info("Login failed for user id=%s", user.id)
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        token = create_access_token(
            data={"sub": user.id, "username": user.username},
            config=self.config,
        )
        logger.info("Issued session token for user id=%s", user.id)
        return token
