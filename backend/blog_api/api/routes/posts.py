from typing import List, Optional
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session
from blog_api.api.dependencies import get_current_identity
from blog_api.api.schemas import PostResponse
from blog_api.core.database import get_db
from blog_api.services.post_service import post_service
from blog_api.services.token_verifier import Identity

router = APIRouter(prefix="/posts", tags=["posts"])


class PostCreate(BaseModel):
    title: Optional[str] = None
    body: Optional[str] = None


class PostUpdate(BaseModel):
    title: Optional[str] = None
    body: Optional[str] = None


@router.get("", response_model=List[PostResponse])
def list_posts(db: Session = Depends(get_db)):
    """List all posts, newest first. No authentication required."""
    return post_service.list_posts(db)


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: str, db: Session = Depends(get_db)):
    """Get a single post with its author and comments"""
    return post_service.get_post(db, post_id)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post: PostCreate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Create a post owned by the current user"""
    return post_service.create_post(db, identity, post.title, post.body)


@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: str,
    post_update: PostUpdate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Update a post; only its author may do this"""
    return post_service.update_post(db, identity, post_id, post_update.title, post_update.body)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: str,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Delete a post and its comments; only its author may do this"""
    post_service.delete_post(db, identity, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
