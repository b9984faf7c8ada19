"""
Liquidity lock check.

DexScreener reports pool liquidity but not lock status, so the status is
inferred: a pool is "likely locked" when liquidity exceeds $50k and is
more than 10% of market cap. This is a placeholder policy with nothing
authoritative behind it; confidence is never reported as high.
"""

import logging

from roma.core.exceptions import ProviderError
from roma.core.models import Chain, LiquidityLockRecord, ProvenanceTag, TokenRecord
from roma.core.protocols import TokenDataProvider

logger = logging.getLogger(__name__)

LOCKED_MIN_LIQUIDITY = 50_000
LOCKED_MIN_RATIO = 0.1


def infer_liquidity_lock(token: TokenRecord) -> LiquidityLockRecord:
    """
    Infer lock status from a token's liquidity and market cap.

    Args:
        token: Token record (normally from DexScreener)

    Returns:
        LiquidityLockRecord tagged with the token's source
    """
    ratio = token.liquidity / max(token.market_cap, 1)
    likely_locked = token.liquidity > LOCKED_MIN_LIQUIDITY and ratio > LOCKED_MIN_RATIO
    source = token.source or ProvenanceTag.DEXSCREENER

    logger.info(
        f"Liquidity: ${token.liquidity:,.0f}, MC: ${token.market_cap:,.0f}, "
        f"Ratio: {ratio * 100:.1f}%"
    )

    if likely_locked:
        return LiquidityLockRecord(
            is_locked=True,
            locked_amount=token.liquidity,
            locked_percentage=min(100.0, ratio * 100),
            data_source=source,
            confidence="medium",
        )

    return LiquidityLockRecord(
        is_locked=False,
        locked_amount=0,
        locked_percentage=0,
        data_source=source,
        confidence="low",
    )


class LiquidityLockService:
    """
    Checks liquidity lock status for a token.

    Usage:
        service = LiquidityLockService(dexscreener_provider)
        lock = await service.check(address, chain)
    """

    def __init__(self, provider: TokenDataProvider):
        """
        Args:
            provider: Market data provider reporting pool liquidity
        """
        self._provider = provider

    async def check(self, address: str, chain: Chain) -> LiquidityLockRecord:
        """
        Check lock status; never raises.

        Returns:
            Inferred record, or an unlocked "unavailable" record if the
            provider failed.
        """
        logger.info(f"Checking liquidity lock for {address[:8]}... on {chain.value}")

        try:
            token = await self._provider.get_token_data(address, chain)
        except (ProviderError, ValueError) as e:
            logger.warning(f"Liquidity lock check failed: {e}")
            return LiquidityLockRecord(
                is_locked=False,
                locked_amount=0,
                locked_percentage=0,
                data_source=ProvenanceTag.UNAVAILABLE,
                confidence="low",
            )

        return infer_liquidity_lock(token)
