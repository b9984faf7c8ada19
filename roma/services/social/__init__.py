"""Social data services."""

from roma.services.social.aggregator import SocialHypeAggregator, search_term
from roma.services.social.analytics import SocialAnalyticsService, combine_social_hype
from roma.services.social.deep_search import DeepSearchClient, rerank_results
from roma.services.social.hype import HypeScore, calculate_hype, estimate_twitter_mentions

__all__ = [
    "SocialHypeAggregator",
    "SocialAnalyticsService",
    "DeepSearchClient",
    "HypeScore",
    "calculate_hype",
    "combine_social_hype",
    "estimate_twitter_mentions",
    "rerank_results",
    "search_term",
]
