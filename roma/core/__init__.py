"""
Core module - models, protocols, and exceptions.

This module contains the fundamental building blocks of the application:
- Data models (Pydantic)
- Protocol definitions (interfaces)
- Custom exceptions
"""

from roma.core.exceptions import (
    AllProvidersExhausted,
    InvalidActionError,
    MalformedResponseError,
    NarratorUnavailable,
    ProviderError,
    RomaError,
)
from roma.core.models import (
    AgentInsight,
    AgentKind,
    Chain,
    ProvenanceTag,
    RiskRecord,
    SecurityRecord,
    SentimentRecord,
    SocialHypeRecord,
    TechnicalRecord,
    TokenRecord,
)
from roma.core.protocols import LLMProvider, SecurityProvider, TokenDataProvider

__all__ = [
    # Exceptions
    "RomaError",
    "ProviderError",
    "MalformedResponseError",
    "AllProvidersExhausted",
    "InvalidActionError",
    "NarratorUnavailable",
    # Models
    "Chain",
    "ProvenanceTag",
    "AgentKind",
    "TokenRecord",
    "SentimentRecord",
    "TechnicalRecord",
    "RiskRecord",
    "SecurityRecord",
    "SocialHypeRecord",
    "AgentInsight",
    # Protocols
    "TokenDataProvider",
    "LLMProvider",
    "SecurityProvider",
]
