"""
Tests for social hype scoring and aggregation.

Tests cover:
- Twitter estimate determinism and clamping
- Hype score bounds, velocity and organic flag
- Per-channel max merging with provenance tags
- Notes and data quality
- Social analytics for the social-hype endpoint
"""

import re

import pytest
from aioresponses import CallbackResult, aioresponses

from roma.core.exceptions import ProviderError
from roma.core.models import (
    Chain,
    ProvenanceTag,
    RedditMetrics,
    SearchResult,
    TokenMentions,
    TokenRecord,
    TwitterMetrics,
)
from roma.services.social.aggregator import SocialHypeAggregator, search_term
from roma.services.social.analytics import (
    SocialAnalyticsService,
    combine_social_hype,
    trending_score,
)
from roma.services.social.deep_search import SERPER_SEARCH_URL, TAVILY_SEARCH_URL
from roma.services.social.hype import calculate_hype, estimate_twitter_mentions
from roma.templates.messages import (
    SOCIAL_NOTE_COINGECKO_UNAVAILABLE,
    SOCIAL_NOTE_FOLLOWER_ESTIMATES,
    SOCIAL_NOTE_NO_ACTIVITY,
    SOCIAL_NOTE_SEARCH_UNAVAILABLE,
    SOCIAL_NOTE_SERPER_FAILED,
    SOCIAL_NOTE_TWITTER_ESTIMATED,
)

TWITTER_URL_PATTERN = re.compile(r"^https://api\.twitter\.com/2/tweets/counts/recent.*$")


class FakeCommunity:
    """Stands in for CoinGeckoTokenDataProvider.fetch_contract."""

    def __init__(self, community_data: object = None, fail: bool = False):
        self._community_data = community_data
        self._fail = fail

    async def fetch_contract(self, address: str, chain: Chain) -> dict:
        if self._fail:
            raise ProviderError("coingecko", status=404)
        return {"community_data": self._community_data}


class FakeDeepSearch:
    """Stands in for DeepSearchClient.search_token_mentions."""

    is_configured = True

    def __init__(self, twitter: int = 0, reddit: int = 0):
        self._mentions = TokenMentions(
            twitter=[SearchResult(title=f"tweet {i}") for i in range(twitter)],
            reddit=[SearchResult(title=f"post {i}") for i in range(reddit)],
        )
        self.terms: list[str] = []

    async def search_token_mentions(self, symbol: str, name: str, time_range: str = "24h"):
        self.terms.append(symbol)
        return self._mentions


@pytest.fixture
def community_stats() -> dict:
    """50k followers, 4k subscribers, 3k telegram members."""
    return {
        "twitter_followers": 50_000,
        "reddit_subscribers": 4_000,
        "telegram_channel_user_count": 3_000,
    }


class TestTwitterEstimate:
    """Tests for estimate_twitter_mentions."""

    def test_deterministic(self, solana_address: str) -> None:
        first = estimate_twitter_mentions(solana_address, 1_000_000, 0)
        second = estimate_twitter_mentions(solana_address, 1_000_000, 0)

        assert first == second

    def test_scaled_from_reddit(self) -> None:
        """Address "A" hashes to 65: multiplier 2 + 5/10 = 2.5."""
        assert estimate_twitter_mentions("A", 0, 10) == 25

    def test_grows_with_volume(self) -> None:
        """Address "A": factor 0.8 + 25/100 = 1.05; log10(1e6) × 3 × 1.05 = 18.9."""
        assert estimate_twitter_mentions("A", 1_000_000, 0) == 18

    def test_clamped(self) -> None:
        assert estimate_twitter_mentions("A", 0, 1_000) == 500
        assert estimate_twitter_mentions("A", 0, 0) == 1
        assert estimate_twitter_mentions("A", 0.5, 0) == 1


class TestHypeScore:
    """Tests for calculate_hype."""

    def test_saturated_channels(self) -> None:
        """Each channel saturates: 50 + 30 + 20."""
        result = calculate_hype(200, 30, 5_000)

        assert result.score == 100
        assert result.velocity == "accelerating"
        assert result.is_organic is False

    def test_no_activity(self) -> None:
        result = calculate_hype(0, 0)

        assert result.score == 0
        assert result.velocity == "declining"
        assert result.is_organic is False

    def test_balanced_activity_is_organic(self) -> None:
        result = calculate_hype(100, 10)

        assert result.score == 35
        assert result.velocity == "stable"
        assert result.is_organic is True

    @pytest.mark.parametrize("twitter", [0, 1, 50, 10_000])
    @pytest.mark.parametrize("reddit", [0, 3, 100])
    @pytest.mark.parametrize("telegram", [None, 0, 2_500, 1_000_000])
    def test_score_bounds(self, twitter: int, reddit: int, telegram: int | None) -> None:
        assert 0 <= calculate_hype(twitter, reddit, telegram).score <= 100


class TestSocialAggregator:
    """Tests for SocialHypeAggregator."""

    def test_search_term(self) -> None:
        assert search_term("Bonk!") == "BONK"
        assert search_term("dog wif hat") == "DOGWIFHAT"

    @pytest.mark.asyncio
    async def test_no_activity(self, static_provider, solana_address: str) -> None:
        """No sources and no volume: both channels unavailable with a note."""
        aggregator = SocialHypeAggregator(static_provider(ProvenanceTag.DEXSCREENER, None))

        result = await aggregator.analyze(solana_address, "BONK")

        assert result.twitter_mentions_24h == 0
        assert result.reddit_posts_24h == 0
        assert result.data_sources.twitter == ProvenanceTag.UNAVAILABLE
        assert result.data_sources.reddit == ProvenanceTag.UNAVAILABLE
        assert result.notes == [
            SOCIAL_NOTE_COINGECKO_UNAVAILABLE,
            SOCIAL_NOTE_SEARCH_UNAVAILABLE,
            SOCIAL_NOTE_NO_ACTIVITY,
        ]
        assert result.data_quality == "low"
        assert result.hype_score == 0

    @pytest.mark.asyncio
    async def test_twitter_estimated_from_volume(
        self,
        static_provider,
        healthy_token: TokenRecord,
        solana_address: str,
    ) -> None:
        """With volume but no twitter data, the estimate is tagged estimated."""
        aggregator = SocialHypeAggregator(
            static_provider(ProvenanceTag.DEXSCREENER, healthy_token)
        )

        result = await aggregator.analyze(solana_address, "BONK")

        expected = estimate_twitter_mentions(solana_address, healthy_token.volume_24h, 0)
        assert result.twitter_mentions_24h == expected
        assert result.data_sources.twitter == ProvenanceTag.ESTIMATED
        assert result.data_sources.reddit == ProvenanceTag.UNAVAILABLE
        assert SOCIAL_NOTE_TWITTER_ESTIMATED in result.notes

    @pytest.mark.asyncio
    async def test_community_stats(
        self,
        static_provider,
        community_stats: dict,
        solana_address: str,
    ) -> None:
        """Follower counts are scaled: 1% of followers, 0.5% of subscribers."""
        aggregator = SocialHypeAggregator(
            static_provider(ProvenanceTag.DEXSCREENER, None),
            community=FakeCommunity(community_stats),
        )

        result = await aggregator.analyze(solana_address, "BONK")

        assert result.twitter_mentions_24h == 500
        assert result.reddit_posts_24h == 20
        assert result.telegram_members == 3_000
        assert result.data_sources.twitter == ProvenanceTag.COINGECKO
        assert result.data_sources.telegram == ProvenanceTag.COINGECKO
        assert SOCIAL_NOTE_FOLLOWER_ESTIMATES in result.notes
        assert result.data_quality == "high"

    @pytest.mark.asyncio
    async def test_max_wins_and_sets_provenance(
        self,
        static_provider,
        community_stats: dict,
        solana_address: str,
    ) -> None:
        """Per channel the larger count wins; its source becomes the tag."""
        deep_search = FakeDeepSearch(twitter=3, reddit=40)
        aggregator = SocialHypeAggregator(
            static_provider(ProvenanceTag.DEXSCREENER, None),
            community=FakeCommunity(community_stats),
            deep_search=deep_search,
        )

        result = await aggregator.analyze(solana_address, "$bonk")

        assert result.twitter_mentions_24h == 500
        assert result.data_sources.twitter == ProvenanceTag.COINGECKO
        assert result.reddit_posts_24h == 40
        assert result.data_sources.reddit == ProvenanceTag.OPENDEEPSEARCH
        assert result.notes == [SOCIAL_NOTE_FOLLOWER_ESTIMATES]
        assert result.hype_score == 92
        assert result.trending_velocity == "accelerating"
        assert deep_search.terms == ["BONK"]

    @pytest.mark.asyncio
    async def test_community_failure_adds_note(
        self,
        static_provider,
        solana_address: str,
    ) -> None:
        aggregator = SocialHypeAggregator(
            static_provider(ProvenanceTag.DEXSCREENER, None),
            community=FakeCommunity(fail=True),
            deep_search=FakeDeepSearch(twitter=12, reddit=4),
        )

        result = await aggregator.analyze(solana_address, "BONK")

        assert result.notes == [SOCIAL_NOTE_COINGECKO_UNAVAILABLE]
        assert result.data_sources.twitter == ProvenanceTag.OPENDEEPSEARCH
        assert result.data_quality == "high"

    @pytest.mark.asyncio
    async def test_malformed_community_data_ignored(
        self,
        static_provider,
        solana_address: str,
    ) -> None:
        """A non-object community_data counts as no data."""
        aggregator = SocialHypeAggregator(
            static_provider(ProvenanceTag.DEXSCREENER, None),
            community=FakeCommunity("n/a"),
        )

        result = await aggregator.analyze(solana_address, "BONK")

        assert result.twitter_mentions_24h == 0
        assert SOCIAL_NOTE_NO_ACTIVITY in result.notes

    @pytest.mark.asyncio
    async def test_direct_serper_fallback(
        self,
        static_provider,
        solana_address: str,
    ) -> None:
        """Without CoinGecko or deep search data, Serper hit counts are used."""
        aggregator = SocialHypeAggregator(
            static_provider(ProvenanceTag.DEXSCREENER, None),
            serper_api_key="test-serper-key",
            timeout=1.0,
        )
        payload = {"organic": [{"title": f"hit {i}"} for i in range(7)]}

        with aioresponses() as m:
            m.post(SERPER_SEARCH_URL, payload=payload, repeat=True)

            result = await aggregator.analyze(solana_address, "BONK")

        assert result.twitter_mentions_24h == 7
        assert result.reddit_posts_24h == 7
        assert result.data_sources.twitter == ProvenanceTag.SERPER
        assert result.data_sources.reddit == ProvenanceTag.SERPER
        assert result.data_quality == "medium"

    @pytest.mark.asyncio
    async def test_serper_failure_adds_note(
        self,
        static_provider,
        solana_address: str,
    ) -> None:
        aggregator = SocialHypeAggregator(
            static_provider(ProvenanceTag.DEXSCREENER, None),
            serper_api_key="test-serper-key",
            timeout=1.0,
        )

        with aioresponses() as m:
            m.post(SERPER_SEARCH_URL, status=500, repeat=True)

            result = await aggregator.analyze(solana_address, "BONK")

        assert result.notes == [
            SOCIAL_NOTE_COINGECKO_UNAVAILABLE,
            SOCIAL_NOTE_SEARCH_UNAVAILABLE,
            SOCIAL_NOTE_SERPER_FAILED,
            SOCIAL_NOTE_NO_ACTIVITY,
        ]

    @pytest.mark.asyncio
    async def test_serper_partial_failure_keeps_other_channel(
        self,
        static_provider,
        solana_address: str,
    ) -> None:
        """A failed reddit search does not discard the twitter hits."""
        aggregator = SocialHypeAggregator(
            static_provider(ProvenanceTag.DEXSCREENER, None),
            serper_api_key="test-serper-key",
            timeout=1.0,
        )

        def serper(url, **kwargs):
            if "reddit.com" in kwargs["json"]["q"]:
                return CallbackResult(status=500)
            return CallbackResult(payload={"organic": [{"title": "hit"}] * 12})

        with aioresponses() as m:
            m.post(SERPER_SEARCH_URL, callback=serper, repeat=True)

            result = await aggregator.analyze(solana_address, "BONK")

        assert result.twitter_mentions_24h == 12
        assert result.data_sources.twitter == ProvenanceTag.SERPER
        assert result.reddit_posts_24h == 0
        assert result.data_sources.reddit == ProvenanceTag.UNAVAILABLE
        assert result.data_quality == "medium"
        assert result.notes == [
            SOCIAL_NOTE_COINGECKO_UNAVAILABLE,
            SOCIAL_NOTE_SEARCH_UNAVAILABLE,
            SOCIAL_NOTE_SERPER_FAILED,
        ]

    @pytest.mark.asyncio
    async def test_wire_format(
        self,
        static_provider,
        healthy_token: TokenRecord,
        solana_address: str,
    ) -> None:
        """Absent telegram is omitted; provenance tags are plain strings."""
        aggregator = SocialHypeAggregator(
            static_provider(ProvenanceTag.DEXSCREENER, healthy_token)
        )

        data = (await aggregator.analyze(solana_address, "BONK")).to_json()

        assert "telegramMembers" not in data
        assert data["dataSources"] == {
            "twitter": "estimated",
            "reddit": "unavailable",
            "telegram": "unavailable",
        }


class TestSocialAnalytics:
    """Tests for the social-hype endpoint service."""

    @pytest.mark.parametrize(
        ("count", "score"),
        [(1001, 90), (1000, 75), (501, 75), (101, 50), (51, 30), (11, 15), (10, 5), (0, 5)],
    )
    def test_trending_tiers(self, count: int, score: int) -> None:
        assert trending_score(count) == score

    def test_combine_weights(self) -> None:
        """10 mentions and 5 posts each hit their channel cap."""
        result = combine_social_hype(
            TwitterMetrics(mentions=10, trending_score=15),
            RedditMetrics(posts=5),
        )

        assert result.hype_score == 100
        assert result.velocity == "declining"
        assert result.quality == "real"

    def test_combine_without_data(self) -> None:
        result = combine_social_hype(TwitterMetrics(), RedditMetrics())

        assert result.hype_score == 0
        assert result.quality == "estimated"

    @pytest.mark.asyncio
    async def test_no_keys_returns_zeros(self) -> None:
        service = SocialAnalyticsService()

        result = await service.calculate_social_hype("BONK", "addr")

        assert result.twitter.mentions == 0
        assert result.reddit.posts == 0
        assert result.quality == "estimated"

    @pytest.mark.asyncio
    async def test_twitter_counts(self) -> None:
        service = SocialAnalyticsService(twitter_bearer_token="test-token", timeout=1.0)

        with aioresponses() as m:
            m.get(TWITTER_URL_PATTERN, payload={"meta": {"total_tweet_count": 150}})

            result = await service.fetch_twitter_metrics("BONK", "addr")

        assert result.mentions == 150
        assert result.sentiment == "positive"
        assert result.trending_score == 50

    @pytest.mark.asyncio
    async def test_twitter_failure_returns_zeros(self) -> None:
        service = SocialAnalyticsService(twitter_bearer_token="test-token", timeout=1.0)

        with aioresponses() as m:
            m.get(TWITTER_URL_PATTERN, status=429)

            result = await service.fetch_twitter_metrics("BONK", "addr")

        assert result == TwitterMetrics()

    @pytest.mark.asyncio
    async def test_reddit_falls_back_to_tavily(self) -> None:
        service = SocialAnalyticsService(
            serper_api_key="test-serper-key",
            tavily_api_key="test-tavily-key",
            timeout=1.0,
        )

        with aioresponses() as m:
            m.post(SERPER_SEARCH_URL, status=500)
            m.post(TAVILY_SEARCH_URL, payload={"results": [{"url": "u"}] * 4})

            result = await service.fetch_reddit_metrics("BONK")

        assert result.posts == 4
        assert result.comments == 60
        assert result.sentiment == "neutral"
