from functools import lru_cache
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from passlib.context import CryptContext
from sqlalchemy.orm import Session
from blog_api.core.config import Settings, get_settings
from blog_api.core.database import get_db
from blog_api.core.security import build_password_context
from blog_api.repositories.credential_store import CredentialStore
from blog_api.services.authenticator import Authenticator
from blog_api.services.token_verifier import Identity, TokenVerifier

# Extracts the token from "Authorization: Bearer <token>"
# auto_error=False so a missing header goes through TokenVerifier like any bad token
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


@lru_cache
def _password_context(rounds: int) -> CryptContext:
    return build_password_context(rounds)


def get_credential_store(db: Session = Depends(get_db)) -> CredentialStore:
    return CredentialStore(db)


def get_authenticator(
    store: CredentialStore = Depends(get_credential_store),
    config: Settings = Depends(get_settings),
) -> Authenticator:
    return Authenticator(store, _password_context(config.BCRYPT_ROUNDS), config)


def get_token_verifier(
    store: CredentialStore = Depends(get_credential_store),
    config: Settings = Depends(get_settings),
) -> TokenVerifier:
    # Re-resolve the user so deleted or renamed accounts lose access
    return TokenVerifier(config, store)


def get_current_identity(
    token: str | None = Depends(oauth2_scheme),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> Identity:
    """
    Require a valid session token.

    Raises UnauthorizedError (rendered as 401) when the token is missing,
    malformed, expired, or belongs to a user that no longer exists.
    """
    return verifier.verify(token)
