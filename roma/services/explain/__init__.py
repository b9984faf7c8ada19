"""Narrative generation services."""

from roma.services.explain.chat_completion_provider import (
    FIREWORKS_API_URL,
    GROQ_API_URL,
    ChatCompletionProvider,
)
from roma.services.explain.mock_llm import MockLLMProvider
from roma.services.explain.service import InsightNarrator

__all__ = [
    "ChatCompletionProvider",
    "FIREWORKS_API_URL",
    "GROQ_API_URL",
    "InsightNarrator",
    "MockLLMProvider",
]
