"""
Social analytics for the social-hype endpoint.

Combines a Twitter recent tweet count with a Reddit post count into
a SocialHypeData summary. Each channel degrades to zeros when its
provider is not configured or fails.
"""

import asyncio
import logging

from roma.core.exceptions import ProviderError
from roma.core.models import RedditMetrics, SocialHypeData, TwitterMetrics
from roma.services.http import fetch_json
from roma.services.social.deep_search import SERPER_SEARCH_URL, TAVILY_SEARCH_URL
from roma.utils.numbers import round_half_up, to_int

logger = logging.getLogger(__name__)

TWITTER_COUNTS_URL = "https://api.twitter.com/2/tweets/counts/recent"

DEFAULT_TIMEOUT = 10.0

TWITTER_WEIGHT = 0.7
REDDIT_WEIGHT = 0.3

REDDIT_RESULTS = 10
COMMENTS_PER_POST = 15

# (tweet count above, trending score), highest first
TRENDING_TIERS = ((1000, 90), (500, 75), (100, 50), (50, 30), (10, 15))
MIN_TRENDING_SCORE = 5


def trending_score(tweet_count: int) -> int:
    """Bucket a 7-day tweet count into a trending score."""
    for threshold, score in TRENDING_TIERS:
        if tweet_count > threshold:
            return score
    return MIN_TRENDING_SCORE


def twitter_metrics_from_count(tweet_count: int) -> TwitterMetrics:
    if tweet_count > 100:
        sentiment = "positive"
    elif tweet_count > 20:
        sentiment = "neutral"
    else:
        sentiment = "negative"

    return TwitterMetrics(
        mentions=tweet_count,
        recent_tweets=tweet_count,
        sentiment=sentiment,
        trending_score=trending_score(tweet_count),
    )


def reddit_metrics_from_posts(posts: int) -> RedditMetrics:
    if posts > 5:
        sentiment = "bullish"
    elif posts > 2:
        sentiment = "neutral"
    else:
        sentiment = "bearish"

    return RedditMetrics(posts=posts, comments=posts * COMMENTS_PER_POST, sentiment=sentiment)


def combine_social_hype(twitter: TwitterMetrics, reddit: RedditMetrics) -> SocialHypeData:
    """
    Weighted hype summary.

    twitterScore = min(100, mentions / 10 × 0.7 × 100)
    redditScore  = min(100, posts / 5 × 0.3 × 100)
    """
    twitter_score = min(100, twitter.mentions / 10 * TWITTER_WEIGHT * 100)
    reddit_score = min(100, reddit.posts / 5 * REDDIT_WEIGHT * 100)

    if twitter.trending_score > 60:
        velocity = "rising"
    elif twitter.trending_score < 20:
        velocity = "declining"
    else:
        velocity = "stable"

    has_real_data = twitter.mentions > 0 or reddit.posts > 0

    return SocialHypeData(
        twitter=twitter,
        reddit=reddit,
        hype_score=round_half_up(twitter_score + reddit_score),
        velocity=velocity,
        quality="real" if has_real_data else "estimated",
    )


class SocialAnalyticsService:
    """
    Twitter and Reddit activity metrics.

    Usage:
        service = SocialAnalyticsService(twitter_bearer_token="...", serper_api_key="...")
        data = await service.calculate_social_hype("BONK", address)
    """

    def __init__(
        self,
        twitter_bearer_token: str = "",
        serper_api_key: str = "",
        tavily_api_key: str = "",
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._twitter_bearer_token = twitter_bearer_token
        self._serper_api_key = serper_api_key
        self._tavily_api_key = tavily_api_key
        self._timeout = timeout

    async def fetch_twitter_metrics(self, symbol: str, address: str) -> TwitterMetrics:
        """Recent tweet count for symbol or address; zeros on any failure."""
        if not self._twitter_bearer_token:
            return TwitterMetrics()

        try:
            data = await fetch_json(
                "twitter",
                "GET",
                TWITTER_COUNTS_URL,
                timeout=self._timeout,
                headers={"Authorization": f"Bearer {self._twitter_bearer_token}"},
                params={"query": f"{symbol} OR {address} -is:retweet lang:en"},
            )
        except ProviderError as e:
            logger.error(f"Twitter API error: {e}")
            return TwitterMetrics()

        meta = data.get("meta") if isinstance(data, dict) else None
        count = to_int(meta.get("total_tweet_count")) if isinstance(meta, dict) else 0
        return twitter_metrics_from_count(count)

    async def fetch_reddit_metrics(self, symbol: str) -> RedditMetrics:
        """Reddit post count via Serper, then Tavily; zeros if neither answers."""
        query = f"site:reddit.com {symbol} crypto"

        if self._serper_api_key:
            try:
                data = await fetch_json(
                    "serper",
                    "POST",
                    SERPER_SEARCH_URL,
                    timeout=self._timeout,
                    headers={"X-API-KEY": self._serper_api_key},
                    json={"q": query, "num": REDDIT_RESULTS},
                )
            except ProviderError as e:
                logger.error(f"Serper error: {e}")
            else:
                return reddit_metrics_from_posts(_count(data, "organic"))

        if self._tavily_api_key:
            try:
                data = await fetch_json(
                    "tavily",
                    "POST",
                    TAVILY_SEARCH_URL,
                    timeout=self._timeout,
                    json={
                        "api_key": self._tavily_api_key,
                        "query": query,
                        "max_results": REDDIT_RESULTS,
                    },
                )
            except ProviderError as e:
                logger.error(f"Tavily error: {e}")
            else:
                return reddit_metrics_from_posts(_count(data, "results"))

        return RedditMetrics()

    async def calculate_social_hype(self, symbol: str, address: str) -> SocialHypeData:
        """Fetch both channels concurrently and combine them."""
        twitter, reddit = await asyncio.gather(
            self.fetch_twitter_metrics(symbol, address),
            self.fetch_reddit_metrics(symbol),
        )
        return combine_social_hype(twitter, reddit)


def _count(data: object, key: str) -> int:
    items = data.get(key) if isinstance(data, dict) else None
    return len(items) if isinstance(items, list) else 0
