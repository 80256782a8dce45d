from typing import Optional
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.orm import Session
from blog_api.api.dependencies import get_current_identity
from blog_api.api.schemas import CommentResponse, MessageResponse
from blog_api.core.database import get_db
from blog_api.services.comment_service import comment_service
from blog_api.services.token_verifier import Identity

router = APIRouter(prefix="/comments", tags=["comments"])


class CommentBody(BaseModel):
    body: Optional[str] = None


@router.post("/{post_id}", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    post_id: str,
    comment: CommentBody,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Comment on a post"""
    return comment_service.create_comment(db, identity, post_id, comment.body)


@router.put("/{comment_id}", response_model=CommentResponse)
def update_comment(
    comment_id: str,
    comment: CommentBody,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    return comment_service.update_comment(db, identity, comment_id, comment.body)


@router.delete("/{comment_id}", response_model=MessageResponse)
def delete_comment(
    comment_id: str,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    return comment_service.delete_comment(db, identity, comment_id)
