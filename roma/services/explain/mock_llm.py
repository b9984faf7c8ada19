"""
Mock LLM provider for development.

Returns canned, deterministic completions without calling a real
endpoint. The reply depends only on the last user message, so tests
can assert on it. Nothing is retained between calls.
"""


class MockLLMProvider:
    """
    LLMProvider that echoes a short canned answer.

    Usage:
        provider = MockLLMProvider()
        text = await provider.complete(messages)
    """

    def __init__(self, prefix: str = "[mock]"):
        self._prefix = prefix

    async def complete(self, messages: list[dict[str, str]]) -> str:
        user_turns = [m["content"] for m in messages if m.get("role") == "user"]
        question = user_turns[-1] if user_turns else ""

        # Keep the first sentence of the prompt so replies stay short
        first_sentence = question.split(". ")[0].rstrip(".")
        return f"{self._prefix} {first_sentence}."
