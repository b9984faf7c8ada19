"""
Insight narrator.

Turns analysis records into short natural-language commentary by
delegating to hosted LLM endpoints.

Responsibilities:
1. Build role-specific prompts for agent insights
2. Build the chat assistant's context summary and history window
3. Call the LLM provider
4. Fall back to deterministic text on any failure

Never raises for LLM failures: callers always get a string.
"""

import logging
from collections.abc import Mapping
from typing import Any

from roma.core.exceptions import NarratorUnavailable
from roma.core.models import ChatContext
from roma.core.protocols import LLMProvider
from roma.services.explain.prompts import (
    build_chat_messages,
    build_insight_prompt,
    fallback_insight,
    system_prompt,
)
from roma.templates.messages import CHAT_APOLOGY

logger = logging.getLogger(__name__)


class InsightNarrator:
    """
    Generates agent insights and chat replies.

    It does NOT:
    - Fetch token data (that's TokenDataAggregator's job)
    - Calculate scores (that's the scorers' job)

    Usage:
        narrator = InsightNarrator(insight_llm=groq, chat_llm=fireworks)
        text = await narrator.generate_agent_insight("risk", risk.to_json())
    """

    def __init__(self, insight_llm: LLMProvider, chat_llm: LLMProvider):
        """
        Args:
            insight_llm: Provider for agent insights
            chat_llm: Provider for the chat assistant
        """
        self._insight_llm = insight_llm
        self._chat_llm = chat_llm

    async def generate_agent_insight(self, agent: str, context: Mapping[str, Any] | None) -> str:
        """
        Generate a 1-2 sentence insight for an agent role.

        Args:
            agent: "data", "sentiment", "technical" or "risk"
            context: Record JSON for that role (camelCase keys)

        Returns:
            LLM text, or a deterministic fallback if the LLM failed
        """
        context = context or {}
        messages = [
            {"role": "system", "content": system_prompt(agent)},
            {"role": "user", "content": build_insight_prompt(agent, context)},
        ]

        logger.info(f"Generating {agent} insight")

        try:
            return await self._insight_llm.complete(messages)
        except NarratorUnavailable as e:
            logger.error(f"Error generating {agent} insight: {e}")
            return fallback_insight(agent, context)

    async def chat(
        self,
        user_message: str,
        token_context: ChatContext | None = None,
        history: list[dict[str, str]] | None = None,
    ) -> str:
        """
        Answer a chat message with the analysis as context.

        Args:
            user_message: The user's question
            token_context: Analysis sections computed so far
            history: Prior turns; only the last 6 are sent

        Returns:
            Assistant reply, or a canned apology if the LLM failed
        """
        messages = build_chat_messages(user_message, token_context, history or [])

        logger.info(f"Chat request with {len(messages) - 2} history turns")

        try:
            return await self._chat_llm.complete(messages)
        except NarratorUnavailable as e:
            logger.error(f"Error in chat: {e}")
            return CHAT_APOLOGY
