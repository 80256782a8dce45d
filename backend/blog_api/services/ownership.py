import logging
from blog_api.core.errors import ForbiddenError
from blog_api.services.token_verifier import Identity

logger = logging.getLogger(__name__)

EDIT = "edit"
DELETE = "delete"
ACTIONS = frozenset({EDIT, DELETE})


class OwnershipGuard:
    """Only a resource's author may edit or delete it."""

    def authorize(self, identity: Identity, resource_author_id: str,
                  action: str, resource: str = "post") -> None:
        if action not in ACTIONS:
            raise ValueError(f"Unknown action: {action!r}")

        # Compare identifiers as they are; usernames are not a substitute
        if identity.user_id == resource_author_id:
            return

        logger.warning(
            "Denied %s on %s owned by %s to user id=%s",
            action, resource, resource_author_id, identity.user_id,
        )
        raise ForbiddenError(f"You can only {action} your own {resource}s")


ownership_guard = OwnershipGuard()
