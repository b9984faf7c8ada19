"""
Deep search client.

Web search over Serper (Google) with Tavily as fallback, plus an
optional "pro" mode that reranks hits by keyword overlap, source quality
and recency. Used to count recent token mentions per social channel.

Provider failures are logged and swallowed: search returns [] when
nothing answered.
"""

import logging
from datetime import datetime, timezone
from typing import Literal

from roma.core.exceptions import ProviderError
from roma.core.models import SearchResult, TokenMentions
from roma.services.http import fetch_json

logger = logging.getLogger(__name__)

SERPER_SEARCH_URL = "https://google.serper.dev/search"
TAVILY_SEARCH_URL = "https://api.tavily.com/search"

DEFAULT_TIMEOUT = 10.0

TimeRange = Literal["24h", "7d", "30d", "all"]

# Google "tbs" recency filter per time range
SERPER_TIME_FILTERS = {"24h": "qdr:d", "7d": "qdr:w", "30d": "qdr:m", "all": ""}

# Tavily "days" per time range
TAVILY_DAYS = {"24h": 1, "7d": 7, "30d": 30, "all": 365}

# Rerank weights
TITLE_TERM_BOOST = 0.3
SNIPPET_TERM_BOOST = 0.1
CRYPTO_SUBREDDIT_BOOST = 0.5
TWITTER_BOOST = 0.3
BLOG_BOOST = 0.2
LAST_DAY_BOOST = 0.4
LAST_WEEK_BOOST = 0.2

_DATE_FORMATS = ("%b %d, %Y", "%d %b %Y", "%Y-%m-%d")


def _parse_date(value: str) -> datetime | None:
    """Parse an absolute result date; relative ("3 hours ago") dates give None."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        parsed = None
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def rerank_results(
    results: list[SearchResult],
    query: str,
    now: datetime | None = None,
) -> list[SearchResult]:
    """
    Rescore and sort results, best first.

    Adds to each result's base relevance:
    +0.3 per query term in the title, +0.1 per term in the snippet,
    +0.5 for r/cryptocurrency or r/cryptomoonshots, +0.3 for twitter/x,
    +0.2 for medium/substack, +0.4 if dated within 24h (+0.2 within a week).
    """
    now = now or datetime.now(timezone.utc)
    terms = query.lower().split()

    rescored = []
    for result in results:
        score = result.relevance_score

        title = result.title.lower()
        snippet = result.snippet.lower()
        score += sum(TITLE_TERM_BOOST for term in terms if term in title)
        score += sum(SNIPPET_TERM_BOOST for term in terms if term in snippet)

        url = result.url.lower()
        if "reddit.com/r/cryptocurrency" in url or "reddit.com/r/cryptomoonshots" in url:
            score += CRYPTO_SUBREDDIT_BOOST
        if "twitter.com" in url or "x.com" in url:
            score += TWITTER_BOOST
        if "medium.com" in url or "substack.com" in url:
            score += BLOG_BOOST

        published = _parse_date(result.date) if result.date else None
        if published is not None:
            hours_ago = (now - published).total_seconds() / 3600
            if hours_ago < 24:
                score += LAST_DAY_BOOST
            elif hours_ago < 168:
                score += LAST_WEEK_BOOST

        rescored.append(result.model_copy(update={"relevance_score": score}))

    rescored.sort(key=lambda r: r.relevance_score, reverse=True)
    return rescored


class DeepSearchClient:
    """
    Serper-then-Tavily web search.

    Usage:
        client = DeepSearchClient(serper_api_key="...", tavily_api_key="...")
        hits = await client.search("bonk memecoin", time_range="7d", mode="pro")
    """

    def __init__(
        self,
        serper_api_key: str = "",
        tavily_api_key: str = "",
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._serper_api_key = serper_api_key
        self._tavily_api_key = tavily_api_key
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        """True if at least one search provider has a key."""
        return bool(self._serper_api_key or self._tavily_api_key)

    async def search(
        self,
        query: str,
        *,
        mode: Literal["default", "pro"] = "default",
        max_results: int = 10,
        time_range: TimeRange = "24h",
    ) -> list[SearchResult]:
        """
        Search the web.

        Serper is tried first; an empty or failed Serper answer falls
        through to Tavily.

        Returns:
            Up to max_results hits ([] if no provider answered)
        """
        logger.info(f"Deep search: {query!r} ({mode} mode, {time_range})")

        if self._serper_api_key:
            try:
                results = await self.search_serper(query, time_range, max_results)
            except ProviderError as e:
                logger.warning(f"Serper search failed: {e}")
            else:
                if results:
                    logger.info(f"Found {len(results)} results via Serper")
                    return rerank_results(results, query) if mode == "pro" else results

        if self._tavily_api_key:
            try:
                results = await self.search_tavily(query, time_range, max_results)
            except ProviderError as e:
                logger.warning(f"Tavily search failed: {e}")
            else:
                logger.info(f"Found {len(results)} results via Tavily")
                return rerank_results(results, query) if mode == "pro" else results

        logger.warning("No search providers available")
        return []

    async def search_serper(
        self, query: str, time_range: TimeRange, max_results: int
    ) -> list[SearchResult]:
        """Google search through Serper (organic + news hits)."""
        data = await fetch_json(
            "serper",
            "POST",
            SERPER_SEARCH_URL,
            timeout=self._timeout,
            headers={"X-API-KEY": self._serper_api_key},
            json={
                "q": query,
                "num": max_results,
                "gl": "us",
                "hl": "en",
                "tbs": SERPER_TIME_FILTERS.get(time_range, ""),
            },
        )

        if not isinstance(data, dict):
            return []

        results = [
            SearchResult(
                title=item.get("title") or "",
                url=item.get("link") or "",
                snippet=item.get("snippet") or "",
                date=item.get("date"),
            )
            for key in ("organic", "news")
            for item in data.get(key) or []
            if isinstance(item, dict)
        ]
        return results[:max_results]

    async def search_tavily(
        self, query: str, time_range: TimeRange, max_results: int
    ) -> list[SearchResult]:
        """Tavily basic-depth search."""
        data = await fetch_json(
            "tavily",
            "POST",
            TAVILY_SEARCH_URL,
            timeout=self._timeout,
            json={
                "api_key": self._tavily_api_key,
                "query": query,
                "search_depth": "basic",
                "max_results": max_results,
                "days": TAVILY_DAYS.get(time_range, 1),
            },
        )

        if not isinstance(data, dict):
            return []

        return [
            SearchResult(
                title=item.get("title") or "",
                url=item.get("url") or "",
                snippet=item.get("content") or "",
                relevance_score=item.get("score") or 1.0,
            )
            for item in data.get("results") or []
            if isinstance(item, dict)
        ]

    async def search_token_mentions(
        self,
        token_symbol: str,
        token_name: str,
        time_range: TimeRange = "24h",
    ) -> TokenMentions:
        """
        Count recent mentions of a token on Twitter/X, Reddit and news sites.

        Long symbols (10+ chars) are replaced by the first word of the name.
        """
        term = token_symbol if len(token_symbol) < 10 else token_name.split(" ")[0]
        logger.info(f"Searching mentions for {token_symbol} ({token_name})")

        twitter = await self.search(
            f'site:twitter.com OR site:x.com "${term}" crypto',
            time_range=time_range,
            max_results=20,
        )
        reddit = await self.search(
            f'site:reddit.com/r/CryptoMoonShots OR site:reddit.com/r/cryptocurrency "{term}" crypto',
            time_range=time_range,
            max_results=20,
        )
        news = await self.search(
            f'"{term}" cryptocurrency token',
            time_range=time_range,
            max_results=10,
        )

        mentions = TokenMentions(twitter=twitter, reddit=reddit, news=news)
        logger.info(
            f"Found {len(twitter)} Twitter, {len(reddit)} Reddit, {len(news)} news mentions"
        )
        return mentions
