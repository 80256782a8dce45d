from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from blog_api.core.config import Settings, settings


def build_password_context(rounds: int) -> CryptContext:
    """CryptContext for bcrypt with an explicit work factor"""
    # bcrypt generates a salt per hash and embeds it in the output
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


pwd_context = build_password_context(settings.BCRYPT_ROUNDS)


def verify_password(plain_password: str, hashed_password: str,
                    context: Optional[CryptContext] = None) -> bool:
    """Verify a password against a hash using constant-time comparison"""
    return (context or pwd_context).verify(plain_password, hashed_password)


def get_password_hash(password: str, context: Optional[CryptContext] = None) -> str:
    """Hash a password using bcrypt"""
    return (context or pwd_context).hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None,
                        config: Optional[Settings] = None) -> str:
    """Create a signed JWT; exp is only set when an expiry is in effect"""
    config = config or settings
    to_encode = data.copy()

    now = datetime.now(timezone.utc)
    to_encode["iat"] = now

    if expires_delta is None and config.token_expiry_enabled:
        expires_delta = timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    if expires_delta is not None:
        to_encode["exp"] = now + expires_delta

    # Algorithm must match in decode - changing this breaks all existing tokens
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def decode_access_token(token: str, config: Optional[Settings] = None) -> Optional[dict]:
    """Decode and verify a JWT token"""
    config = config or settings
    try:
        # Signature and exp are checked by jose; only the configured
        # algorithm is accepted, which also rules out "none"
        return jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except JWTError:
        # Expired, tampered, or signed with another key
        return None
