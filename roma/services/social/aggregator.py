"""
Social hype aggregator.

Unlike market data, social data is merged rather than taken from the
first success. Sources are consulted in order:

1. CoinGecko community stats (follower-based estimates)
2. Deep search mention counts (24h)
3. Direct Serper search, only when 1 and 2 produced nothing

Per channel the maximum count wins and its source becomes the channel's
provenance tag. A missing twitter count is then estimated from 24h
volume and reddit activity.
"""

import asyncio
import logging
import math
import re
from dataclasses import dataclass, field

from roma.core.exceptions import ProviderError
from roma.core.models import (
    Chain,
    ProvenanceTag,
    SocialDataSources,
    SocialHypeRecord,
)
from roma.core.protocols import TokenDataProvider
from roma.services.http import fetch_json
from roma.services.social.deep_search import SERPER_SEARCH_URL, DeepSearchClient
from roma.services.social.hype import calculate_hype, estimate_twitter_mentions
from roma.services.token_data.coingecko_provider import CoinGeckoTokenDataProvider
from roma.templates.messages import (
    SOCIAL_NOTE_COINGECKO_UNAVAILABLE,
    SOCIAL_NOTE_FOLLOWER_ESTIMATES,
    SOCIAL_NOTE_NO_ACTIVITY,
    SOCIAL_NOTE_SEARCH_UNAVAILABLE,
    SOCIAL_NOTE_SERPER_FAILED,
    SOCIAL_NOTE_TWITTER_ESTIMATED,
)
from roma.utils.numbers import to_int, to_number

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

# CoinGecko follower counts -> daily activity
TWITTER_FOLLOWER_RATE = 0.01
REDDIT_SUBSCRIBER_RATE = 0.005

SERPER_DIRECT_RESULTS = 50

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def search_term(symbol: str) -> str:
    """Keyword used for mention searches: alphanumerics only, uppercased."""
    return _NON_ALNUM.sub("", symbol).upper()


@dataclass
class _SocialCounts:
    """Per-channel counts and provenance while sources are merged."""

    twitter: int = 0
    reddit: int = 0
    telegram: int = 0
    sources: SocialDataSources = field(default_factory=SocialDataSources)
    notes: list[str] = field(default_factory=list)

    def offer(self, channel: str, count: int, tag: ProvenanceTag) -> bool:
        """Keep count if it beats the channel's current max. Returns True if taken."""
        if count <= getattr(self, channel):
            return False
        setattr(self, channel, count)
        setattr(self.sources, channel, tag)
        return True


class SocialHypeAggregator:
    """
    Builds a SocialHypeRecord for a token.

    Every source is optional; a missing or failing source only adds a
    note. analyze() never raises for provider failures.
    """

    def __init__(
        self,
        volume_provider: TokenDataProvider,
        community: CoinGeckoTokenDataProvider | None = None,
        deep_search: DeepSearchClient | None = None,
        serper_api_key: str = "",
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Args:
            volume_provider: Market data provider for 24h volume (DexScreener)
            community: CoinGecko provider for community stats
            deep_search: Search client for mention counts
            serper_api_key: Key for the direct Serper fallback
            timeout: Request timeout in seconds
        """
        self._volume_provider = volume_provider
        self._community = community
        self._deep_search = deep_search
        self._serper_api_key = serper_api_key
        self._timeout = timeout

    async def analyze(self, address: str, symbol: str) -> SocialHypeRecord:
        """
        Aggregate social activity for a Solana token.

        Args:
            address: Token mint address
            symbol: Token symbol or name used as search keyword

        Returns:
            SocialHypeRecord with per-channel provenance and notes
        """
        term = search_term(symbol)
        logger.info(f"Analyzing social hype for {symbol} ({address[:8]}...), term ${term}")

        counts = _SocialCounts()
        volume = await self._fetch_volume(address)

        has_coingecko = await self._merge_community(address, counts)
        has_deep_search = await self._merge_deep_search(term, counts)

        if not has_deep_search and not has_coingecko and self._serper_api_key:
            await self._merge_serper(term, counts)

        if counts.twitter == 0 and (volume > 0 or counts.reddit > 0):
            counts.twitter = estimate_twitter_mentions(address, volume, counts.reddit)
            counts.sources.twitter = ProvenanceTag.ESTIMATED
            counts.notes.append(SOCIAL_NOTE_TWITTER_ESTIMATED)

        if counts.twitter == 0 and counts.reddit == 0:
            counts.notes.append(SOCIAL_NOTE_NO_ACTIVITY)
            counts.sources.twitter = ProvenanceTag.UNAVAILABLE
            counts.sources.reddit = ProvenanceTag.UNAVAILABLE

        if ProvenanceTag.COINGECKO in (counts.sources.twitter, counts.sources.reddit):
            counts.notes.append(SOCIAL_NOTE_FOLLOWER_ESTIMATES)

        hype = calculate_hype(counts.twitter, counts.reddit, counts.telegram)

        if has_deep_search or (has_coingecko and counts.telegram > 0):
            quality = "high"
        elif has_coingecko or counts.sources.twitter == ProvenanceTag.SERPER:
            quality = "medium"
        else:
            quality = "low"

        logger.info(
            f"Social hype complete - Score: {hype.score}/100, Quality: {quality}, "
            f"Sources: Twitter({counts.sources.twitter.value}), "
            f"Reddit({counts.sources.reddit.value}), "
            f"Telegram({counts.sources.telegram.value})"
        )

        return SocialHypeRecord(
            twitter_mentions_24h=counts.twitter,
            reddit_posts_24h=counts.reddit,
            telegram_members=counts.telegram or None,
            trending_velocity=hype.velocity,
            hype_score=hype.score,
            is_organic=hype.is_organic,
            data_sources=counts.sources,
            data_quality=quality,
            notes=counts.notes or None,
        )

    async def _fetch_volume(self, address: str) -> float:
        try:
            token = await self._volume_provider.get_token_data(address, Chain.SOLANA)
        except ProviderError as e:
            logger.info(f"Could not fetch volume data: {e}")
            return 0.0
        return token.volume_24h

    async def _merge_community(self, address: str, counts: _SocialCounts) -> bool:
        """Merge CoinGecko follower-based estimates. Returns True if any channel was set."""
        if self._community is None:
            counts.notes.append(SOCIAL_NOTE_COINGECKO_UNAVAILABLE)
            return False

        try:
            data = await self._community.fetch_contract(address, Chain.SOLANA)
        except ProviderError as e:
            logger.info(f"CoinGecko social data unavailable: {e}")
            counts.notes.append(SOCIAL_NOTE_COINGECKO_UNAVAILABLE)
            return False

        community = data.get("community_data")
        if not isinstance(community, dict):
            community = {}
        followers = to_number(community.get("twitter_followers"))
        subscribers = to_number(community.get("reddit_subscribers"))
        telegram = to_int(community.get("telegram_channel_user_count"))

        found = False
        if followers > 0:
            counts.offer("twitter", math.floor(followers * TWITTER_FOLLOWER_RATE), ProvenanceTag.COINGECKO)
            found = True
        if subscribers > 0:
            counts.offer("reddit", math.floor(subscribers * REDDIT_SUBSCRIBER_RATE), ProvenanceTag.COINGECKO)
            found = True
        if telegram > 0:
            counts.offer("telegram", telegram, ProvenanceTag.COINGECKO)

        logger.info(
            f"CoinGecko: Twitter {followers:.0f} followers, Reddit {subscribers:.0f} subs, "
            f"Telegram {telegram} members"
        )
        return found

    async def _merge_deep_search(self, term: str, counts: _SocialCounts) -> bool:
        """Merge 24h mention counts. Returns True if search found mentions."""
        if self._deep_search is None or not self._deep_search.is_configured:
            counts.notes.append(SOCIAL_NOTE_SEARCH_UNAVAILABLE)
            return False

        try:
            mentions = await self._deep_search.search_token_mentions(term, term, "24h")
        except ProviderError as e:
            logger.info(f"Deep search unavailable: {e}")
            counts.notes.append(SOCIAL_NOTE_SEARCH_UNAVAILABLE)
            return False

        found = False
        if mentions.twitter:
            counts.offer("twitter", len(mentions.twitter), ProvenanceTag.OPENDEEPSEARCH)
            found = True
        if mentions.reddit:
            counts.offer("reddit", len(mentions.reddit), ProvenanceTag.OPENDEEPSEARCH)
            found = True

        logger.info(
            f"Deep search: {len(mentions.twitter)} Twitter, "
            f"{len(mentions.reddit)} Reddit mentions (24h)"
        )
        return found

    async def _merge_serper(self, term: str, counts: _SocialCounts) -> None:
        """Direct Serper organic hit counts; a failed channel is skipped, the other kept."""
        queries = {
            "twitter": f'site:twitter.com OR site:x.com "${term}" crypto',
            "reddit": f'site:reddit.com "${term}" crypto',
        }

        responses = await asyncio.gather(
            *(self._serper_count(query) for query in queries.values()),
            return_exceptions=True,
        )

        failed = False
        for channel, response in zip(queries, responses):
            if isinstance(response, ProviderError):
                logger.error(f"Serper {channel} search failed: {response}")
                failed = True
                continue
            if isinstance(response, BaseException):
                raise response
            counts.offer(channel, response, ProvenanceTag.SERPER)

        if failed:
            counts.notes.append(SOCIAL_NOTE_SERPER_FAILED)

        logger.info(f"Serper: {counts.twitter} Twitter, {counts.reddit} Reddit")

    async def _serper_count(self, query: str) -> int:
        data = await fetch_json(
            "serper",
            "POST",
            SERPER_SEARCH_URL,
            timeout=self._timeout,
            headers={"X-API-KEY": self._serper_api_key},
            json={"q": query, "num": SERPER_DIRECT_RESULTS, "tbs": "qdr:d"},
        )
        organic = data.get("organic") if isinstance(data, dict) else None
        return len(organic) if isinstance(organic, list) else 0
