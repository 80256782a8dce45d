import logging
import random
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from blog_api.core.errors import NotFoundError
from blog_api.models.comment import Comment
from blog_api.models.post import Post
from blog_api.services.ownership import DELETE, EDIT, OwnershipGuard, ownership_guard
from blog_api.services.token_verifier import Identity
from blog_api.services.validation import raise_for_errors, validate_post

logger = logging.getLogger(__name__)

# Pastel card backgrounds, one picked at random per post
POST_COLORS = [
    "#fce4ec", "#e3f2fd", "#e8f5e9", "#fff3e0", "#f3e5f5",
    "#f9fbe7", "#e0f7fa", "#fffde7", "#ede7f6", "#f1f8e9",
]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _with_relations(query):
    # Author and comment authors are always needed to render a post
    return query.options(
        selectinload(Post.author),
        selectinload(Post.comments).selectinload(Comment.author),
    )


class PostService:
    def __init__(self, guard: Optional[OwnershipGuard] = None):
        self.guard = guard or ownership_guard

    @staticmethod
    def list_posts(db: Session) -> List[Post]:
        """All posts, newest first"""
        return _with_relations(db.query(Post)).order_by(Post.created_at.desc()).all()

    @staticmethod
    def get_post(db: Session, post_id: str) -> Post:
        post = _with_relations(db.query(Post)).filter(Post.id == post_id).first()
        if post is None:
            raise NotFoundError(f"Post with ID {post_id} not found")
        return post

    def create_post(self, db: Session, identity: Identity, title: str, body: str) -> Post:
        raise_for_errors(validate_post(title, body))

        now = utcnow()
        post = Post(
            title=title.strip(),
            body=body.strip(),
            color=random.choice(POST_COLORS),
            author_id=identity.user_id,
            created_at=now,
            updated_at=now,
        )
        db.add(post)
        db.commit()
        logger.info("User id=%s created post %s", identity.user_id, post.id)
        return self.get_post(db, post.id)

    def update_post(self, db: Session, identity: Identity, post_id: str,
                    title: Optional[str] = None, body: Optional[str] = None) -> Post:
        post = self.get_post(db, post_id)
        self.guard.authorize(identity, post.author_id, EDIT, resource="post")
        raise_for_errors(validate_post(title, body, partial=True))

        if title is not None:
            post.title = title.strip()
        if body is not None:
            post.body = body.strip()
        post.updated_at = utcnow()
        db.commit()
        return self.get_post(db, post_id)

    def delete_post(self, db: Session, identity: Identity, post_id: str) -> None:
        post = self.get_post(db, post_id)
        self.guard.authorize(identity, post.author_id, DELETE, resource="post")

        # Comments go with the post through the delete-orphan cascade
        db.delete(post)
        db.commit()
        logger.info("User id=%s deleted post %s", identity.user_id, post_id)


post_service = PostService()
