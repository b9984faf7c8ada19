"""
CoinGecko token data provider.

Last resort for EVM chains: looks the token up by contract address.
The same contract endpoint also carries community statistics, which
the social aggregator reads through fetch_contract().
"""

import logging
from datetime import datetime, timezone

from roma.core.exceptions import MalformedResponseError
from roma.core.models import Chain, ProvenanceTag, TokenRecord
from roma.services.http import fetch_json
from roma.utils.numbers import to_number

logger = logging.getLogger(__name__)

COINGECKO_API_URL = "https://api.coingecko.com/api/v3"

DEFAULT_TIMEOUT = 10.0

# Chain -> CoinGecko asset platform id
PLATFORM_IDS = {
    Chain.SOLANA: "solana",
    Chain.ETHEREUM: "ethereum",
    Chain.BSC: "binance-smart-chain",
    Chain.BASE: "base",
}


def contract_url(address: str, chain: Chain) -> str:
    """CoinGecko contract lookup URL for a token."""
    return f"{COINGECKO_API_URL}/coins/{PLATFORM_IDS[chain]}/contract/{address}"


class CoinGeckoTokenDataProvider:
    """TokenDataProvider backed by the CoinGecko contract endpoint."""

    name = ProvenanceTag.COINGECKO

    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Args:
            api_key: CoinGecko demo API key
            timeout: Request timeout in seconds
        """
        self._api_key = api_key
        self._timeout = timeout

    async def fetch_contract(self, address: str, chain: Chain) -> dict:
        """
        Fetch the raw contract document.

        Raises:
            ProviderError: If the API fails
            MalformedResponseError: If the body is not a JSON object
        """
        data = await fetch_json(
            self.name.value,
            "GET",
            contract_url(address, chain),
            timeout=self._timeout,
            headers={"x-cg-demo-api-key": self._api_key} if self._api_key else None,
        )
        if not isinstance(data, dict):
            raise MalformedResponseError(self.name.value)
        return data

    async def get_token_data(self, address: str, chain: Chain) -> TokenRecord:
        """Fetch token market data from CoinGecko."""
        data = await self.fetch_contract(address, chain)
        market = data.get("market_data") or {}

        def usd(key: str) -> float:
            value = market.get(key)
            return to_number(value.get("usd") if isinstance(value, dict) else None)

        symbol = data.get("symbol")

        return TokenRecord(
            address=address,
            chain=chain,
            name=data.get("name") or "Unknown Token",
            symbol=symbol.upper() if symbol else "???",
            price=max(0.0, usd("current_price")),
            price_change_24h=to_number(market.get("price_change_percentage_24h")),
            volume_24h=usd("total_volume"),
            market_cap=usd("market_cap"),
            liquidity=max(0.0, usd("total_value_locked")),
            holders=0,
            created_at=data.get("genesis_date")
            or datetime.now(timezone.utc).isoformat(),
            source=self.name,
        )
