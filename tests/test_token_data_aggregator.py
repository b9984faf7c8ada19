"""
Tests for TokenDataAggregator.

Tests cover:
- First provider success
- Fallback to the next provider with provenance tag
- Records never merged across providers
- Malformed data treated as provider failure
- All providers exhausted
"""

import pytest

from roma.core.exceptions import AllProvidersExhausted
from roma.core.models import Chain, ProvenanceTag, TokenRecord
from roma.services.token_data.aggregator import TokenDataAggregator


class BrokenPayloadProvider:
    """Provider whose payload cannot be normalized."""

    name = ProvenanceTag.DEXSCREENER

    async def get_token_data(self, address: str, chain: Chain) -> TokenRecord:
        raise ValueError("could not convert string to float: 'abc'")


@pytest.fixture
def birdeye_record(solana_address: str) -> TokenRecord:
    """Record as Birdeye would return it (holders present)."""
    return TokenRecord(
        address=solana_address,
        chain=Chain.SOLANA,
        name="Bonk",
        symbol="BONK",
        price=0.00002,
        price_change_24h=-3.5,
        volume_24h=150_000,
        market_cap=1_200_000,
        liquidity=90_000,
        holders=4_200,
    )


class TestAggregatorSuccess:
    """Tests for the happy path."""

    @pytest.mark.asyncio
    async def test_first_provider_wins(
        self,
        static_provider,
        birdeye_record: TokenRecord,
        solana_address: str,
    ) -> None:
        """First successful provider should serve the record; later ones are not called."""
        dexscreener = static_provider(ProvenanceTag.DEXSCREENER, birdeye_record)
        birdeye = static_provider(ProvenanceTag.BIRDEYE, birdeye_record)
        aggregator = TokenDataAggregator({Chain.SOLANA: [dexscreener, birdeye]})

        result = await aggregator.get_token_data(solana_address, Chain.SOLANA)

        assert result.source == ProvenanceTag.DEXSCREENER
        assert dexscreener.calls == 1
        assert birdeye.calls == 0

    @pytest.mark.asyncio
    async def test_source_is_overwritten_with_provider_tag(
        self,
        static_provider,
        birdeye_record: TokenRecord,
        solana_address: str,
    ) -> None:
        """The aggregator tags the record with the serving provider's name."""
        mislabeled = birdeye_record.model_copy(update={"source": ProvenanceTag.COINGECKO})
        provider = static_provider(ProvenanceTag.BIRDEYE, mislabeled)
        aggregator = TokenDataAggregator({Chain.SOLANA: [provider]})

        result = await aggregator.get_token_data(solana_address, Chain.SOLANA)

        assert result.source == ProvenanceTag.BIRDEYE


class TestAggregatorFallback:
    """Tests for the fallback chain."""

    @pytest.mark.asyncio
    async def test_falls_back_when_primary_fails(
        self,
        static_provider,
        birdeye_record: TokenRecord,
        solana_address: str,
    ) -> None:
        """A failing DexScreener should fall through to Birdeye."""
        dexscreener = static_provider(ProvenanceTag.DEXSCREENER, None)
        birdeye = static_provider(ProvenanceTag.BIRDEYE, birdeye_record)
        aggregator = TokenDataAggregator({Chain.SOLANA: [dexscreener, birdeye]})

        result = await aggregator.get_token_data(solana_address, Chain.SOLANA)

        assert result.source == ProvenanceTag.BIRDEYE
        assert dexscreener.calls == 1
        assert birdeye.calls == 1

    @pytest.mark.asyncio
    async def test_fallback_record_comes_from_one_provider(
        self,
        static_provider,
        birdeye_record: TokenRecord,
        solana_address: str,
    ) -> None:
        """Every field of a fallback record should be the fallback provider's own."""
        dexscreener = static_provider(ProvenanceTag.DEXSCREENER, None)
        birdeye = static_provider(ProvenanceTag.BIRDEYE, birdeye_record)
        aggregator = TokenDataAggregator({Chain.SOLANA: [dexscreener, birdeye]})

        result = await aggregator.get_token_data(solana_address, Chain.SOLANA)

        expected = birdeye_record.model_copy(update={"source": ProvenanceTag.BIRDEYE})
        assert result == expected

    @pytest.mark.asyncio
    async def test_malformed_payload_counts_as_failure(
        self,
        static_provider,
        birdeye_record: TokenRecord,
        solana_address: str,
    ) -> None:
        """A provider raising ValueError should be skipped like an API failure."""
        birdeye = static_provider(ProvenanceTag.BIRDEYE, birdeye_record)
        aggregator = TokenDataAggregator(
            {Chain.SOLANA: [BrokenPayloadProvider(), birdeye]}
        )

        result = await aggregator.get_token_data(solana_address, Chain.SOLANA)

        assert result.source == ProvenanceTag.BIRDEYE


class TestAggregatorExhausted:
    """Tests for total failure."""

    @pytest.mark.asyncio
    async def test_all_providers_fail(self, static_provider, evm_address: str) -> None:
        """Should raise AllProvidersExhausted when every provider fails."""
        aggregator = TokenDataAggregator(
            {
                Chain.ETHEREUM: [
                    static_provider(ProvenanceTag.DEXSCREENER, None),
                    static_provider(ProvenanceTag.COINGECKO, None),
                ]
            }
        )

        with pytest.raises(AllProvidersExhausted) as exc_info:
            await aggregator.get_token_data(evm_address, Chain.ETHEREUM)

        assert exc_info.value.message == "Failed to fetch token data from all sources"
        assert "dexscreener" in exc_info.value.technical_message
        assert "coingecko" in exc_info.value.technical_message

    @pytest.mark.asyncio
    async def test_chain_without_providers(self, evm_address: str) -> None:
        """A chain with no configured providers is exhausted immediately."""
        aggregator = TokenDataAggregator({})

        with pytest.raises(AllProvidersExhausted):
            await aggregator.get_token_data(evm_address, Chain.BASE)

    def test_providers_for_returns_configured_order(self, static_provider) -> None:
        """providers_for should return the chain's providers in priority order."""
        first = static_provider(ProvenanceTag.DEXSCREENER)
        second = static_provider(ProvenanceTag.COINGECKO)
        aggregator = TokenDataAggregator({Chain.BSC: [first, second]})

        assert list(aggregator.providers_for(Chain.BSC)) == [first, second]
        assert list(aggregator.providers_for(Chain.SOLANA)) == []
