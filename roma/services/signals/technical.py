"""Technical view derived from market data only."""

from roma.core.models import TechnicalRecord, TokenRecord
from roma.templates.messages import (
    PRICE_ACTION_BEARISH,
    PRICE_ACTION_BULLISH,
    PRICE_ACTION_NEUTRAL,
)

TREND_THRESHOLD = 5.0
INCREASING_VOLUME_RATIO = 0.1
SUPPORT_FACTOR = 0.9
RESISTANCE_FACTOR = 1.1


def analyze_technical(token: TokenRecord) -> TechnicalRecord:
    """
    Classify trend and derive support/resistance.

    trend: bullish if 24h change > 5%, bearish if < -5%, else neutral.
    volumeTrend: "increasing" if 24h volume > 10% of market cap, else "stable".
    """
    change = token.price_change_24h

    if change > TREND_THRESHOLD:
        trend, price_action = "bullish", PRICE_ACTION_BULLISH
    elif change < -TREND_THRESHOLD:
        trend, price_action = "bearish", PRICE_ACTION_BEARISH
    else:
        trend, price_action = "neutral", PRICE_ACTION_NEUTRAL

    if token.volume_24h > token.market_cap * INCREASING_VOLUME_RATIO:
        volume_trend = "increasing"
    else:
        volume_trend = "stable"

    return TechnicalRecord(
        trend=trend,
        volume_trend=volume_trend,
        price_action=price_action,
        support=token.price * SUPPORT_FACTOR,
        resistance=token.price * RESISTANCE_FACTOR,
    )
