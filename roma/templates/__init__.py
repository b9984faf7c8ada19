"""User-facing message templates."""

from roma.templates.messages import (
    CHAT_APOLOGY,
    ERROR_GENERIC,
    ERROR_INVALID_ACTION,
    ERROR_SOCIAL_DATA,
)

__all__ = [
    "CHAT_APOLOGY",
    "ERROR_GENERIC",
    "ERROR_INVALID_ACTION",
    "ERROR_SOCIAL_DATA",
]
