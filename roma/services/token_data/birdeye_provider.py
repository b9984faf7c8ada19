"""
Birdeye token data provider.

Solana-only fallback used when DexScreener has no usable pair.
Fetches the token overview endpoint, which also reports holder counts.
"""

import logging
from datetime import datetime, timezone

from roma.core.exceptions import MalformedResponseError
from roma.core.models import Chain, ProvenanceTag, TokenRecord
from roma.services.http import fetch_json
from roma.utils.numbers import to_int, to_number

logger = logging.getLogger(__name__)

BIRDEYE_OVERVIEW_URL = "https://public-api.birdeye.so/defi/token_overview"

DEFAULT_TIMEOUT = 10.0


class BirdeyeTokenDataProvider:
    """TokenDataProvider backed by the Birdeye token overview API."""

    name = ProvenanceTag.BIRDEYE

    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Args:
            api_key: Birdeye API key
            timeout: Request timeout in seconds
        """
        self._api_key = api_key
        self._timeout = timeout

    async def get_token_data(self, address: str, chain: Chain) -> TokenRecord:
        """
        Fetch token overview from Birdeye.

        Raises:
            ProviderError: If the API fails
            MalformedResponseError: If the response has no success/data envelope
        """
        payload = await fetch_json(
            self.name.value,
            "GET",
            BIRDEYE_OVERVIEW_URL,
            timeout=self._timeout,
            headers={"X-API-KEY": self._api_key},
            params={"address": address},
        )

        if not isinstance(payload, dict) or not payload.get("success"):
            raise MalformedResponseError(
                self.name.value, technical_message="Invalid Birdeye response"
            )

        data = payload.get("data")
        if not isinstance(data, dict) or not data:
            raise MalformedResponseError(
                self.name.value, technical_message="Birdeye response has no data"
            )

        logger.debug(f"Birdeye overview received for {address[:8]}")

        return TokenRecord(
            address=address,
            chain=Chain.SOLANA,
            name=data.get("name") or data.get("symbol") or "Unknown Token",
            symbol=data.get("symbol") or "???",
            price=max(0.0, to_number(data.get("price"))),
            price_change_24h=to_number(
                data.get("priceChange24hPercent"), data.get("price24hChange")
            ),
            volume_24h=to_number(data.get("v24hUSD"), data.get("volume24h")),
            market_cap=to_number(data.get("mc"), data.get("marketCap")),
            liquidity=max(
                0.0, to_number(data.get("liquidity"), data.get("liquidityUsd"))
            ),
            holders=max(0, to_int(data.get("holder"), data.get("uniqueWallet24h"))),
            created_at=datetime.now(timezone.utc).isoformat(),
            source=self.name,
        )
