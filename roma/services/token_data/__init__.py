"""Token data services."""

from roma.services.token_data.aggregator import TokenDataAggregator
from roma.services.token_data.birdeye_provider import BirdeyeTokenDataProvider
from roma.services.token_data.coingecko_provider import CoinGeckoTokenDataProvider
from roma.services.token_data.dexscreener_provider import DexScreenerTokenDataProvider
from roma.services.token_data.mock_provider import MockTokenDataProvider

__all__ = [
    "TokenDataAggregator",
    "DexScreenerTokenDataProvider",
    "BirdeyeTokenDataProvider",
    "CoinGeckoTokenDataProvider",
    "MockTokenDataProvider",
]
