"""
Risk assessment service.

Computes the dashboard risk score by additive rule accumulation.
Each rule that fires adds a fixed number of points to either the
rug-pull or the honeypot bucket and appends a fixed warning string.

Rules:
- liquidity < 10k            → +30 rug pull   "Very low liquidity..."
- market cap < 100k          → +20 rug pull   "Low market cap..."
- volume < 1% of market cap  → +25 honeypot   "Low trading volume..."
- |24h change| > 50%         → +15 rug pull   "Extreme price volatility..."

score = min(100, rug pull + honeypot). A warning is present iff its rule fired.
"""

import logging
from dataclasses import dataclass

from roma.core.models import RiskRecord, TokenRecord
from roma.templates.messages import (
    RISK_WARNING_LOW_LIQUIDITY,
    RISK_WARNING_LOW_MARKET_CAP,
    RISK_WARNING_LOW_VOLUME,
    RISK_WARNING_VOLATILITY,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RiskThresholds:
    """
    Threshold and weight values for the risk score.

    Frozen dataclass ensures immutability.
    """

    # Liquidity (USD)
    low_liquidity: float = 10_000
    low_liquidity_points: int = 30

    # Market cap (USD)
    low_market_cap: float = 100_000
    low_market_cap_points: int = 20

    # 24h volume as a fraction of market cap
    low_volume_ratio: float = 0.01
    low_volume_points: int = 25

    # Absolute 24h price change (percent)
    extreme_volatility: float = 50.0
    extreme_volatility_points: int = 15

    # Liquidity above which the pool is reported as locked
    locked_liquidity: float = 50_000

    max_score: int = 100


class RiskService:
    """
    Service for calculating the additive risk score.

    Pure and stateless: the same TokenRecord always yields the same RiskRecord.

    Usage:
        service = RiskService()
        risk = service.assess_risk(token)
    """

    def __init__(self, thresholds: RiskThresholds | None = None):
        """
        Initialize with optional custom thresholds.

        Args:
            thresholds: Custom risk thresholds (uses defaults if None)
        """
        self._thresholds = thresholds or RiskThresholds()

    def assess_risk(self, token: TokenRecord) -> RiskRecord:
        """
        Assess token risk.

        Args:
            token: Normalized token market data

        Returns:
            RiskRecord with capped score, bucket totals and warnings
        """
        t = self._thresholds
        warnings: list[str] = []
        rug_pull_risk = 0
        honeypot_risk = 0

        if token.liquidity < t.low_liquidity:
            warnings.append(RISK_WARNING_LOW_LIQUIDITY)
            rug_pull_risk += t.low_liquidity_points

        if token.market_cap < t.low_market_cap:
            warnings.append(RISK_WARNING_LOW_MARKET_CAP)
            rug_pull_risk += t.low_market_cap_points

        if token.volume_24h < token.market_cap * t.low_volume_ratio:
            warnings.append(RISK_WARNING_LOW_VOLUME)
            honeypot_risk += t.low_volume_points

        if abs(token.price_change_24h) > t.extreme_volatility:
            warnings.append(RISK_WARNING_VOLATILITY)
            rug_pull_risk += t.extreme_volatility_points

        score = min(t.max_score, rug_pull_risk + honeypot_risk)

        logger.info(
            f"Risk for {token.symbol}: {score}/100 "
            f"(rug pull {rug_pull_risk}, honeypot {honeypot_risk}, "
            f"{len(warnings)} warnings)"
        )

        return RiskRecord(
            score=score,
            rug_pull_risk=rug_pull_risk,
            honeypot_risk=honeypot_risk,
            liquidity_locked=token.liquidity > t.locked_liquidity,
            contract_verified=True,
            warnings=warnings,
        )
