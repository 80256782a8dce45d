import logging
import re

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# (pattern, replacement, flags)
_SENSITIVE_PATTERNS = [
    (r"(password\s*[:=]\s*['\"]?)([^'\"\s,}]+)", r"\1***REDACTED***", re.IGNORECASE),
    (r"(bearer\s+)([A-Za-z0-9_\-\.]{10,})", r"\1***REDACTED***", re.IGNORECASE),
    (r"eyJ[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+", "***JWT***", 0),
    (r"(postgres(?:ql)?|mysql)://([^:/]+):([^@]+)@", r"\1://\2:***REDACTED***@", 0),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement, flags in _SENSITIVE_PATTERNS:
        message = re.sub(pattern, replacement, message, flags=flags)
    return message


class RedactingFilter(logging.Filter):
    """Masks passwords and tokens before a record reaches any handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        rendered = record.getMessage()
        sanitized = sanitize_message(rendered)
        if sanitized != rendered:
            record.msg = sanitized
            record.args = None
        return True


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once; repeated calls only update the level"""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(isinstance(f, RedactingFilter) for h in root.handlers for f in h.filters):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.addFilter(RedactingFilter())
    root.addHandler(handler)
