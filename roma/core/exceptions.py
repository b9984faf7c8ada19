"""
Custom exceptions for the ROMA dashboard API.

Exception hierarchy:
    RomaError (base)
    ├── ProviderError - External API failed (network, timeout, non-2xx)
    │   └── MalformedResponseError - 2xx response with unexpected shape
    ├── AllProvidersExhausted - Every provider in a fallback chain failed
    ├── InvalidActionError - Unknown dispatch action
    └── NarratorUnavailable - LLM endpoint failed (always recovered locally)

Each exception carries a user-facing message that is safe to put in an
HTTP response body, and optionally a technical message for logging.
"""

from roma.templates.messages import ERROR_INVALID_ACTION


class RomaError(Exception):
    """
    Base exception for all ROMA errors.

    Attributes:
        message: User-facing error message (returned in API responses)
        technical_message: Detailed message for logs (optional)
    """

    def __init__(
        self,
        message: str = "Internal server error",
        technical_message: str | None = None,
    ):
        self.message = message
        self.technical_message = technical_message or message
        super().__init__(self.technical_message)

    def __str__(self) -> str:
        return self.technical_message


class ProviderError(RomaError):
    """
    Raised by a provider adapter when its external API is unavailable.

    Recovered by the caller: the fallback chain moves on to the next
    provider, or a conservative default is returned.

    Attributes:
        provider: Identifier of the failing provider (e.g. "dexscreener")
        status: HTTP status code, or None for network/timeout failures
    """

    def __init__(
        self,
        provider: str,
        status: int | None = None,
        technical_message: str | None = None,
    ):
        self.provider = provider
        self.status = status
        detail = f"status {status}" if status is not None else "no response"
        super().__init__(
            message=f"{provider} API unavailable",
            technical_message=technical_message or f"{provider}: {detail}",
        )


class MalformedResponseError(ProviderError):
    """
    Raised when a provider answered 2xx but the payload has an unexpected shape.

    Handled exactly like ProviderError.
    """

    def __init__(self, provider: str, technical_message: str | None = None):
        super().__init__(
            provider,
            status=200,
            technical_message=technical_message or f"{provider}: malformed response",
        )


class AllProvidersExhausted(RomaError):
    """
    Raised when no provider in a fallback chain produced a record.

    This is the only data-layer failure surfaced to API callers (HTTP 500).
    """

    def __init__(
        self,
        message: str = "Failed to fetch token data from all sources",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)


class InvalidActionError(RomaError):
    """Raised when a dispatch endpoint receives an unknown action (HTTP 400)."""

    def __init__(self, action: object = None):
        super().__init__(
            message=ERROR_INVALID_ACTION,
            technical_message=f"Unknown action: {action!r}",
        )


class NarratorUnavailable(RomaError):
    """
    Raised when the LLM chat-completion endpoint fails.

    Never surfaced: the narrator catches it and falls back to a
    deterministic template.
    """

    def __init__(
        self,
        message: str = "AI API request failed",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)
