"""
Tests for simulated dashboard data.

Tests cover:
- Determinism per address and per explicit seed
- Value ranges and ordering
- Whale alert threshold
"""

from datetime import datetime, timezone

import pytest

from roma.core.models import Chain, TokenRecord
from roma.services.simulation import (
    WHALE_ALERT_USD,
    simulate_price_history,
    simulate_sentiment,
    simulate_similar_tokens,
    simulate_whale_activity,
)

FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


class TestSentimentSimulation:
    """Tests for simulate_sentiment."""

    def test_same_address_same_result(self, solana_address: str) -> None:
        first = simulate_sentiment(solana_address, Chain.SOLANA)
        second = simulate_sentiment(solana_address, Chain.SOLANA)

        assert first == second

    def test_explicit_seed_overrides_address(self) -> None:
        """With a seed, the address no longer affects the values."""
        first = simulate_sentiment("AddressOne", Chain.SOLANA, seed=7)
        second = simulate_sentiment("AddressTwo", Chain.SOLANA, seed=7)

        assert first.score == second.score
        assert first.mentions == second.mentions

    def test_ranges_and_trending_rule(self) -> None:
        for seed in range(50):
            result = simulate_sentiment("addr", Chain.BSC, seed=seed)

            assert 0 <= result.score < 100
            assert 0 <= result.mentions < 10_000
            assert result.trending == (result.score > 70 and result.mentions > 1000)
            assert [s.platform for s in result.sources] == ["Twitter", "Reddit"]


class TestWhaleSimulation:
    """Tests for simulate_whale_activity."""

    def test_deterministic_with_fixed_now(self, evm_address: str) -> None:
        first = simulate_whale_activity(evm_address, Chain.ETHEREUM, now=FIXED_NOW)
        second = simulate_whale_activity(evm_address, Chain.ETHEREUM, now=FIXED_NOW)

        assert first == second

    def test_shape_and_ordering(self, evm_address: str) -> None:
        result = simulate_whale_activity(evm_address, Chain.ETHEREUM, now=FIXED_NOW)

        assert len(result.top_holders) == 10
        assert len(result.recent_transactions) == 5

        balances = [h.balance for h in result.top_holders]
        assert balances == sorted(balances, reverse=True)

        timestamps = [t.timestamp for t in result.recent_transactions]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_whale_alert_threshold(self, evm_address: str) -> None:
        """whaleAlert is set iff some trade is worth more than $10k."""
        for seed in range(20):
            result = simulate_whale_activity(evm_address, Chain.ETHEREUM, now=FIXED_NOW, seed=seed)
            expected = any(t.usd_value > WHALE_ALERT_USD for t in result.recent_transactions)
            assert result.whale_alert == expected


class TestSimilarTokensSimulation:
    """Tests for simulate_similar_tokens."""

    def test_sorted_by_similarity(self, healthy_token: TokenRecord) -> None:
        result = simulate_similar_tokens(healthy_token, seed=3)

        assert len(result) == 5
        similarities = [t.similarity for t in result]
        assert similarities == sorted(similarities, reverse=True)
        assert all(70 <= s <= 99 for s in similarities)

    @pytest.mark.parametrize("seed", range(10))
    def test_outcome_rules(self, healthy_token: TokenRecord, seed: int) -> None:
        """Failed tokens are worth 0 with -100% ROI; successes sit at their peak."""
        for token in simulate_similar_tokens(healthy_token, seed=seed):
            if token.outcome == "failed":
                assert token.current_market_cap == 0
                assert token.roi == -100
            elif token.outcome == "success":
                assert token.current_market_cap == token.max_market_cap
            assert token.max_market_cap >= healthy_token.market_cap


class TestPriceHistorySimulation:
    """Tests for simulate_price_history."""

    def test_seven_days_ending_today(self, healthy_token: TokenRecord) -> None:
        result = simulate_price_history(healthy_token, now=FIXED_NOW)

        assert len(result) == 7
        assert result[0].date == "Jun 9"
        assert result[-1].date == "Jun 15"

    def test_jitter_bounds(self, healthy_token: TokenRecord) -> None:
        """Price within ±10%, volume within ±20%."""
        for point in simulate_price_history(healthy_token, now=FIXED_NOW):
            assert 0.9 * healthy_token.price <= point.price <= 1.1 * healthy_token.price
            assert 0.8 * healthy_token.volume_24h <= point.volume <= 1.2 * healthy_token.volume_24h
