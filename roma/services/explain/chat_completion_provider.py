"""
OpenAI-compatible chat-completion provider.

Used for both hosted LLM endpoints:
- Groq (agent insights, low temperature, short answers)
- Fireworks (chat assistant persona, higher temperature)

Responsibilities:
1. POST the message list with model and sampling parameters
2. Return choices[0].message.content
3. Raise NarratorUnavailable on any failure

NO fallback here (that's InsightNarrator's job).
"""

import logging

import aiohttp

from roma.core.exceptions import NarratorUnavailable

logger = logging.getLogger(__name__)

GROQ_API_URL = "https://api.groq.com/openai/v1/chat/completions"
FIREWORKS_API_URL = "https://api.fireworks.ai/inference/v1/chat/completions"

DEFAULT_TIMEOUT = 15.0


class ChatCompletionProvider:
    """
    LLMProvider for an OpenAI-style /chat/completions endpoint.

    Usage:
        groq = ChatCompletionProvider(GROQ_API_URL, api_key, "llama-3.3-70b-versatile")
        text = await groq.complete([{"role": "user", "content": "hi"}])
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 200,
        timeout: float = DEFAULT_TIMEOUT,
        name: str = "llm",
    ):
        """
        Args:
            api_url: Chat completions endpoint
            api_key: Bearer token for the endpoint
            model: Model identifier
            temperature: Sampling temperature
            max_tokens: Completion length limit
            timeout: Request timeout in seconds
            name: Provider name used in logs and errors
        """
        self._api_url = api_url
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._timeout = timeout
        self.name = name

    async def complete(self, messages: list[dict[str, str]]) -> str:
        """
        Run one chat completion.

        Raises:
            NarratorUnavailable: On network error, timeout, non-2xx or bad payload
        """
        payload = {
            "model": self._model,
            "messages": messages,
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
        }

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        timeout = aiohttp.ClientTimeout(total=self._timeout)

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self._api_url,
                    json=payload,
                    headers=headers,
                    timeout=timeout,
                ) as resp:
                    if resp.status != 200:
                        error_text = await resp.text()
                        logger.error(f"{self.name} API error {resp.status}: {error_text[:200]}")
                        raise NarratorUnavailable(
                            technical_message=f"{self.name} {resp.status}: {error_text[:200]}",
                        )

                    data = await resp.json(content_type=None)

        except TimeoutError:
            raise NarratorUnavailable(
                technical_message=f"{self.name} timeout after {self._timeout}s",
            ) from None
        except aiohttp.ClientError as e:
            raise NarratorUnavailable(
                technical_message=f"{self.name} request failed: {type(e).__name__}: {e}",
            ) from e
        except ValueError as e:
            raise NarratorUnavailable(
                technical_message=f"{self.name} returned invalid JSON: {e}",
            ) from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Invalid {self.name} response structure: {e}")
            raise NarratorUnavailable(
                technical_message=f"Invalid {self.name} response: {e}",
            ) from e

        if not isinstance(content, str):
            raise NarratorUnavailable(
                technical_message=f"{self.name} returned non-text content",
            )

        return content
