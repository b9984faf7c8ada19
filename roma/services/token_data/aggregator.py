"""
Market data fallback aggregator.

Tries token data providers in a fixed priority order and returns the
first complete record, tagged with the provider that produced it.

Priority per chain:
1. DexScreener (all chains)
2. Birdeye (solana) / CoinGecko (ethereum, bsc, base)

Records are never merged across providers: each adapter call is atomic.
"""

import logging
from collections.abc import Mapping, Sequence

from roma.core.exceptions import AllProvidersExhausted, ProviderError
from roma.core.models import Chain, TokenRecord
from roma.core.protocols import TokenDataProvider

logger = logging.getLogger(__name__)


class TokenDataAggregator:
    """
    Fetches a TokenRecord through an ordered provider chain.

    The aggregator's responsibility is to:
    1. Pick the provider chain for the requested blockchain
    2. Call providers in order, stopping at the first success
    3. Swallow individual provider failures (logged, not rethrown)
    4. Raise AllProvidersExhausted when nothing worked

    It does NOT:
    - Calculate risk (that's RiskService's job)
    - Generate explanations (that's InsightNarrator's job)
    """

    def __init__(self, chains: Mapping[Chain, Sequence[TokenDataProvider]]):
        """
        Initialize aggregator with provider chains.

        Args:
            chains: Ordered providers to try for each chain
        """
        self._chains = chains

    def providers_for(self, chain: Chain) -> Sequence[TokenDataProvider]:
        """Return the ordered provider chain for a blockchain."""
        return self._chains.get(chain, ())

    async def get_token_data(self, address: str, chain: Chain) -> TokenRecord:
        """
        Fetch token data from the first provider that succeeds.

        Args:
            address: Token address (opaque)
            chain: Blockchain to look the token up on

        Returns:
            TokenRecord whose `source` is the successful provider's tag

        Raises:
            AllProvidersExhausted: If every provider failed
        """
        logger.info(f"Fetching token data for {address[:8]}... on {chain.value}")

        failures: list[str] = []

        for provider in self.providers_for(chain):
            try:
                record = await provider.get_token_data(address, chain)
            except ProviderError as e:
                logger.info(f"{provider.name.value} failed ({e}), trying next provider")
                failures.append(str(e))
                continue
            except (ValueError, TypeError, KeyError, AttributeError) as e:
                # Payload that could not be normalized counts as malformed
                logger.warning(
                    f"{provider.name.value} returned unusable data: "
                    f"{type(e).__name__}: {e}"
                )
                failures.append(f"{provider.name.value}: malformed response")
                continue

            logger.info(f"Token data for {record.symbol} served by {provider.name.value}")
            return record.model_copy(update={"source": provider.name})

        logger.error(f"All token data providers failed for {address[:8]}: {failures}")
        raise AllProvidersExhausted(
            technical_message=f"All providers failed: {'; '.join(failures) or 'none configured'}"
        )
