"""
DexScreener token data provider.

First link of every market-data fallback chain. DexScreener lists all
DEX pairs for a token across chains; the provider keeps the pairs on the
requested chain and uses the one with the deepest USD liquidity.

NO business logic, NO risk calculation.
"""

import logging
from datetime import datetime, timezone

from roma.core.exceptions import MalformedResponseError, ProviderError
from roma.core.models import Chain, ProvenanceTag, TokenRecord
from roma.services.http import fetch_json
from roma.utils.numbers import to_number

logger = logging.getLogger(__name__)

DEXSCREENER_TOKENS_URL = "https://api.dexscreener.com/latest/dex/tokens"

DEFAULT_TIMEOUT = 10.0

# Chain -> DexScreener chainId
CHAIN_IDS = {
    Chain.SOLANA: "solana",
    Chain.ETHEREUM: "ethereum",
    Chain.BSC: "bsc",
    Chain.BASE: "base",
}


class DexScreenerTokenDataProvider:
    """
    TokenDataProvider backed by the public DexScreener API.

    DexScreener does not report holder counts; holders is always 0.
    """

    name = ProvenanceTag.DEXSCREENER

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        """
        Args:
            timeout: Request timeout in seconds
        """
        self._timeout = timeout

    async def get_token_data(self, address: str, chain: Chain) -> TokenRecord:
        """
        Fetch token data from the best DexScreener pair on `chain`.

        Raises:
            ProviderError: If the API fails or no pair exists on the chain
        """
        data = await fetch_json(
            self.name.value,
            "GET",
            f"{DEXSCREENER_TOKENS_URL}/{address}",
            timeout=self._timeout,
        )

        if not isinstance(data, dict):
            raise MalformedResponseError(self.name.value)

        pair = self._select_pair(data.get("pairs") or [], chain)
        if pair is None:
            raise ProviderError(
                self.name.value,
                technical_message=f"Token not found on DexScreener for {chain.value}",
            )

        record = self._build_record(address, chain, pair)
        logger.info(
            f"DexScreener data - MC: ${record.market_cap:,.0f}, "
            f"Vol: ${record.volume_24h:,.0f}, Liq: ${record.liquidity:,.0f}"
        )
        return record

    def _select_pair(self, pairs: list, chain: Chain) -> dict | None:
        """Pick the highest-liquidity pair listed on the requested chain."""
        chain_id = CHAIN_IDS[chain]
        chain_pairs = [
            p for p in pairs if isinstance(p, dict) and p.get("chainId") == chain_id
        ]
        if not chain_pairs:
            return None

        return max(
            chain_pairs,
            key=lambda p: to_number((p.get("liquidity") or {}).get("usd")),
        )

    def _build_record(self, address: str, chain: Chain, pair: dict) -> TokenRecord:
        """Normalize a DexScreener pair into a TokenRecord."""
        base_token = pair.get("baseToken") or {}
        liquidity = pair.get("liquidity") or {}

        created_ms = to_number(pair.get("pairCreatedAt"))
        if created_ms > 0:
            created = datetime.fromtimestamp(created_ms / 1000, tz=timezone.utc)
        else:
            created = datetime.now(timezone.utc)

        return TokenRecord(
            address=address,
            chain=chain,
            name=base_token.get("name") or "Unknown Token",
            symbol=base_token.get("symbol") or "???",
            price=max(0.0, to_number(pair.get("priceUsd"))),
            price_change_24h=to_number((pair.get("priceChange") or {}).get("h24")),
            volume_24h=to_number((pair.get("volume") or {}).get("h24")),
            market_cap=to_number(pair.get("marketCap"), pair.get("fdv")),
            liquidity=max(0.0, to_number(liquidity.get("usd"), liquidity.get("base"))),
            holders=0,  # DexScreener does not provide holder count
            created_at=created.isoformat(),
            source=self.name,
        )
