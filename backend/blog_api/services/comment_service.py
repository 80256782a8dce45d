import logging
from typing import Optional
from sqlalchemy.orm import Session, selectinload
from blog_api.core.errors import NotFoundError
from blog_api.models.comment import Comment
from blog_api.models.post import Post
from blog_api.services.ownership import DELETE, EDIT, OwnershipGuard, ownership_guard
from blog_api.services.post_service import utcnow
from blog_api.services.token_verifier import Identity
from blog_api.services.validation import raise_for_errors, validate_comment

logger = logging.getLogger(__name__)

COMMENT_DELETED_MESSAGE = "Comment deleted successfully"


class CommentService:
    def __init__(self, guard: Optional[OwnershipGuard] = None):
        self.guard = guard or ownership_guard

    @staticmethod
    def get_comment(db: Session, comment_id: str) -> Comment:
        comment = (
            db.query(Comment)
            .options(selectinload(Comment.author))
            .filter(Comment.id == comment_id)
            .first()
        )
        if comment is None:
            raise NotFoundError(f"Comment with ID {comment_id} not found")
        return comment

    def create_comment(self, db: Session, identity: Identity, post_id: str, body: str) -> Comment:
        if db.get(Post, post_id) is None:
            raise NotFoundError(f"Post with ID {post_id} not found")
        raise_for_errors(validate_comment(body))

        now = utcnow()
        comment = Comment(
            body=body.strip(),
            post_id=post_id,
            author_id=identity.user_id,
            created_at=now,
            updated_at=now,
        )
        db.add(comment)
        db.commit()
        logger.info("User id=%s commented on post %s", identity.user_id, post_id)
        return self.get_comment(db, comment.id)

    def update_comment(self, db: Session, identity: Identity, comment_id: str, body: str) -> Comment:
        comment = self.get_comment(db, comment_id)
        self.guard.authorize(identity, comment.author_id, EDIT, resource="comment")
        raise_for_errors(validate_comment(body))

        comment.body = body.strip()
        comment.updated_at = utcnow()
        db.commit()
        return self.get_comment(db, comment_id)

    def delete_comment(self, db: Session, identity: Identity, comment_id: str) -> dict:
        comment = self.get_comment(db, comment_id)
        self.guard.authorize(identity, comment.author_id, DELETE, resource="comment")

        db.delete(comment)
        db.commit()
        logger.info("User id=%s deleted comment %s", identity.user_id, comment_id)
        return {"message": COMMENT_DELETED_MESSAGE}


comment_service = CommentService()
