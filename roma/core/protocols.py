"""
Protocol definitions (interfaces) for external services.

Using typing.Protocol instead of ABC because:
1. Supports duck typing (no inheritance required)
2. Lighter weight
3. Better for dependency injection
4. Easier to mock in tests

Each protocol defines the contract that implementations must follow.
"""

from typing import Protocol, runtime_checkable

from roma.core.models import Chain, ProvenanceTag, TokenRecord


@runtime_checkable
class TokenDataProvider(Protocol):
    """
    Protocol for market data adapters.

    One implementation per external source:
    - DexScreener (DEX pair data, all chains)
    - Birdeye (Solana token overview)
    - CoinGecko (contract lookup)

    For development, MockTokenDataProvider returns fake data.
    """

    name: ProvenanceTag
    """Provenance tag attached to records this provider produces"""

    async def get_token_data(self, address: str, chain: Chain) -> TokenRecord:
        """
        Fetch a fully populated token record.

        Args:
            address: Token contract/mint address (opaque)
            chain: Chain to look the token up on

        Returns:
            TokenRecord built from this provider's response alone

        Raises:
            ProviderError: If the API is unavailable or the token is unknown
        """
        ...


@runtime_checkable
class LLMProvider(Protocol):
    """
    Protocol for hosted chat-completion endpoints.

    Currently supports:
    - Groq (agent insights) - production
    - Fireworks (chat assistant) - production
    - MockLLMProvider - development
    """

    async def complete(self, messages: list[dict[str, str]]) -> str:
        """
        Run one chat completion.

        Args:
            messages: OpenAI-style [{"role": ..., "content": ...}] list

        Returns:
            Assistant message content

        Raises:
            NarratorUnavailable: On HTTP failure, non-2xx or bad payload
        """
        ...


@runtime_checkable
class SecurityProvider(Protocol):
    """
    Protocol for contract security scanners.

    Currently supports:
    - GoPlus token security API - production
    - MockSecurityProvider - development
    """

    async def get_token_security(self, address: str, chain: Chain) -> dict:
        """
        Fetch the raw security entry for a contract.

        Args:
            address: Token contract address
            chain: Chain the contract is deployed on

        Returns:
            GoPlus-shaped entry with "0"/"1" string flags

        Raises:
            ProviderError: If the scanner fails or has no entry for the contract
        """
        ...
