from typing import Optional
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from blog_api.api.dependencies import get_authenticator, get_credential_store, get_current_identity
from blog_api.api.schemas import ResponseModel, UserResponse
from blog_api.core.errors import UnauthorizedError
from blog_api.repositories.credential_store import CredentialStore
from blog_api.services.authenticator import Authenticator
from blog_api.services.token_verifier import INVALID_TOKEN_MESSAGE, Identity

router = APIRouter(prefix="/auth", tags=["auth"])


class Credentials(BaseModel):
    # Optional here so the Authenticator reports missing fields with the
    # same messages as every other rule
    username: Optional[str] = None
    password: Optional[str] = None


class Token(ResponseModel):
    access_token: str
    token_type: str = "bearer"


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    credentials: Credentials,
    authenticator: Authenticator = Depends(get_authenticator),
):
    """Register a new user"""
    return authenticator.register(credentials.username, credentials.password)


@router.post("/login", response_model=Token)
def login(
    credentials: Credentials,
    authenticator: Authenticator = Depends(get_authenticator),
):
    """Exchange username and password for an access token"""
    token = authenticator.login(credentials.username, credentials.password)
    return {"access_token": token, "token_type": "bearer"}


@router.get("/profile", response_model=UserResponse)
def get_profile(
    identity: Identity = Depends(get_current_identity),
    store: CredentialStore = Depends(get_credential_store),
):
    """Get the authenticated user's record"""
    user = store.find_by_id(identity.user_id)
    if user is None:
        raise UnauthorizedError(INVALID_TOKEN_MESSAGE)
    return user
