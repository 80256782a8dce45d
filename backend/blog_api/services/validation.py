"""Input rules for accounts, posts and comments.

Each validator collects every violated rule instead of stopping at the
first one, and returns a mapping of field name to messages. An empty
mapping means the input is acceptable.
"""

import re
import string
from typing import Optional

from blog_api.core.errors import ValidationError
from blog_api.models.comment import COMMENT_MAX_LENGTH

USERNAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")
USERNAME_MAX_LENGTH = 64
PASSWORD_MIN_LENGTH = 8
PASSWORD_SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'
TITLE_MAX_LENGTH = 200

USERNAME_FORMAT_MESSAGE = (
    "Username must start with a letter and contain only letters, numbers, "
    "underscores, or hyphens."
)
PASSWORD_LENGTH_MESSAGE = f"Password must be at least {PASSWORD_MIN_LENGTH} characters long."
PASSWORD_LOWERCASE_MESSAGE = "Password must have at least one lowercase letter."
PASSWORD_UPPERCASE_MESSAGE = "Password must have at least one uppercase letter."
PASSWORD_SPECIAL_MESSAGE = "Password must have at least one special character."

FieldErrors = dict[str, list[str]]


def _add(errors: FieldErrors, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def validate_username(username: Optional[str]) -> list[str]:
    if not username:
        return ["Username is required."]
    problems = []
    if not USERNAME_PATTERN.fullmatch(username):
        problems.append(USERNAME_FORMAT_MESSAGE)
    if len(username) > USERNAME_MAX_LENGTH:
        problems.append(f"Username must be at most {USERNAME_MAX_LENGTH} characters long.")
    return problems


def validate_password(password: Optional[str]) -> list[str]:
    if not password:
        return ["Password is required."]
    problems = []
    if len(password) < PASSWORD_MIN_LENGTH:
        problems.append(PASSWORD_LENGTH_MESSAGE)
    if not any(c in string.ascii_lowercase for c in password):
        problems.append(PASSWORD_LOWERCASE_MESSAGE)
    if not any(c in string.ascii_uppercase for c in password):
        problems.append(PASSWORD_UPPERCASE_MESSAGE)
    if not any(c in PASSWORD_SPECIAL_CHARACTERS for c in password):
        problems.append(PASSWORD_SPECIAL_MESSAGE)
    return problems


def validate_registration(username: Optional[str], password: Optional[str]) -> FieldErrors:
    errors: FieldErrors = {}
    for message in validate_username(username):
        _add(errors, "username", message)
    for message in validate_password(password):
        _add(errors, "password", message)
    return errors


def validate_post(title: Optional[str], body: Optional[str], partial: bool = False) -> FieldErrors:
    """Check post fields; with partial=True, absent fields are allowed"""
    errors: FieldErrors = {}
    if title is not None or not partial:
        if not title or not title.strip():
            _add(errors, "title", "Title is required.")
        elif len(title.strip()) > TITLE_MAX_LENGTH:
            _add(errors, "title", f"Title must be at most {TITLE_MAX_LENGTH} characters long.")
    if body is not None or not partial:
        if not body or not body.strip():
            _add(errors, "body", "Body is required.")
    return errors


def validate_comment(body: Optional[str]) -> FieldErrors:
    errors: FieldErrors = {}
    if not body or not body.strip():
        _add(errors, "body", "Comment body is required.")
    elif len(body.strip()) > COMMENT_MAX_LENGTH:
        _add(errors, "body", f"Comment must be at most {COMMENT_MAX_LENGTH} characters long.")
    return errors


def raise_for_errors(errors: FieldErrors) -> None:
    if errors:
        raise ValidationError(errors)
