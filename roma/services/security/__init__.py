"""Contract security services."""

from roma.services.security.goplus_provider import GoPlusSecurityProvider
from roma.services.security.mock_provider import MockSecurityProvider
from roma.services.security.service import SecurityService, fallback_security, score_security

__all__ = [
    "GoPlusSecurityProvider",
    "MockSecurityProvider",
    "SecurityService",
    "fallback_security",
    "score_security",
]
