from dataclasses import dataclass
from typing import Optional
from blog_api.core.config import Settings, settings
from blog_api.core.errors import UnauthorizedError
from blog_api.core.security import decode_access_token
from blog_api.repositories.credential_store import CredentialStore

INVALID_TOKEN_MESSAGE = "Could not validate credentials"


@dataclass(frozen=True)
class Identity:
    """Who is making the request, as proven by a verified token."""

    user_id: str
    username: str


class TokenVerifier:
    """
    Turns a bearer token into an Identity.

    Without a store this is a pure signature/expiry check. With one, the
    user is re-read so that deleted or renamed accounts stop being honored.
    """

    def __init__(self, config: Optional[Settings] = None,
                 store: Optional[CredentialStore] = None):
        self.config = config or settings
        self.store = store

    def verify(self, token: Optional[str]) -> Identity:
        if not token:
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

        payload = decode_access_token(token, self.config)
        if payload is None:
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

        user_id = payload.get("sub")
        username = payload.get("username")
        if not isinstance(user_id, str) or not isinstance(username, str):
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

        if self.store is not None:
            user = self.store.find_by_id(user_id)
            if user is None or user.username != username:
                raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

        return Identity(user_id=user_id, username=username)
