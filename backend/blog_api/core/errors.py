"""Domain error hierarchy.

Every failure in the auth core and the resource services is raised as a
BlogError subclass. The API layer turns them into JSON responses with the
status code carried on the exception; nothing here knows about HTTP
requests.
"""

from typing import Optional


class BlogError(Exception):
    """Base class for all expected, request-scoped failures."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


class ValidationError(BlogError):
    """Malformed input. Carries every violated rule, grouped per field."""

    status_code = 400
    code = "VALIDATION_ERROR"

    def __init__(self, errors: dict[str, list[str]], message: str = "Invalid request data"):
        super().__init__(message)
        self.errors = errors

    def to_response(self) -> dict:
        body = super().to_response()
        body["error"]["details"] = [
            {"field": field, "message": msg}
            for field, messages in self.errors.items()
            for msg in messages
        ]
        return body


class ConflictError(BlogError):
    status_code = 409
    code = "CONFLICT"


class UnauthorizedError(BlogError):
    status_code = 401
    code = "UNAUTHORIZED"


class ForbiddenError(BlogError):
    status_code = 403
    code = "FORBIDDEN"


class NotFoundError(BlogError):
    status_code = 404
    code = "NOT_FOUND"


class DuplicateKeyError(Exception):
    """Raised by the credential store when a unique column collides."""

    def __init__(self, key: str, value: Optional[str] = None):
        super().__init__(f"Duplicate value for {key}")
        self.key = key
        self.value = value
