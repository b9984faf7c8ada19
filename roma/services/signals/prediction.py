"""
Price prediction.

A linear combination of volume, sentiment, momentum and liquidity
factors. Illustrative only; nothing here is a validated model.

24h change = volumeFactor×15 + sentimentFactor×8 + trendFactor×25
             + (2 if liquidity ratio > 0.1 else -3), clamped to [-30, 50]
7d change  = 24h change × 2.5, then both scaled for micro caps (×1.5 / ×1.8)
             or large caps (×0.7 / ×0.6)
"""

from roma.core.models import (
    PredictionWindow,
    PricePredictionRecord,
    SentimentRecord,
    TokenRecord,
)
from roma.utils.numbers import clamp, round_half_up

MICRO_CAP = 100_000
LARGE_CAP = 10_000_000


def _factors(
    token: TokenRecord,
    sentiment: SentimentRecord,
    volume_factor: float,
) -> list[str]:
    factors: list[str] = []

    if volume_factor > 0.1:
        factors.append("High trading volume")
    elif volume_factor < 0.01:
        factors.append("Low trading activity")

    if token.price_change_24h > 10:
        factors.append("Bullish momentum")
    elif token.price_change_24h < -10:
        factors.append("Bearish pressure")
    else:
        factors.append("Consolidation phase")

    if sentiment.score > 70:
        factors.append("Strong positive sentiment")
    elif sentiment.score < 30:
        factors.append("Negative community sentiment")

    if sentiment.trending:
        factors.append("Trending on social media")

    if token.liquidity < 10_000:
        factors.append("Low liquidity risk")

    if token.market_cap < MICRO_CAP:
        factors.append("Micro-cap volatility")

    if len(factors) < 2:
        factors.extend(["Limited market data", "High uncertainty"])

    return factors


def predict_price(token: TokenRecord, sentiment: SentimentRecord) -> PricePredictionRecord:
    """
    Predict 24h and 7d price movement.

    Args:
        token: Market data
        sentiment: Sentiment record (score, mentions, trending)

    Returns:
        PricePredictionRecord with rounded changes and capped confidences
    """
    mc = max(token.market_cap, 1)
    volume_factor = token.volume_24h / mc
    sentiment_factor = (sentiment.score - 50) / 100
    trend_factor = token.price_change_24h / 100
    liquidity_factor = token.liquidity / mc

    change_24h = (
        volume_factor * 15
        + sentiment_factor * 8
        + trend_factor * 25
        + (2 if liquidity_factor > 0.1 else -3)
    )
    change_24h = clamp(change_24h, -30, 50)
    change_7d = change_24h * 2.5

    if token.market_cap < MICRO_CAP:
        change_24h *= 1.5
        change_7d *= 1.8
    elif token.market_cap > LARGE_CAP:
        change_24h *= 0.7
        change_7d *= 0.6

    confidence = 50
    if token.volume_24h > token.market_cap * 0.05:
        confidence += 15
    if sentiment.mentions > 500:
        confidence += 10
    if token.liquidity > 50_000:
        confidence += 10
    if abs(token.price_change_24h) < 20:
        confidence += 10
    confidence_7d = max(30, confidence - 25)

    return PricePredictionRecord(
        prediction_24h=PredictionWindow(
            price=token.price * (1 + change_24h / 100),
            change=round(change_24h, 1),
            confidence=round_half_up(clamp(confidence, 35, 95)),
        ),
        prediction_7d=PredictionWindow(
            price=token.price * (1 + change_7d / 100),
            change=round(change_7d, 1),
            confidence=round_half_up(clamp(confidence_7d, 25, 85)),
        ),
        factors=_factors(token, sentiment, volume_factor),
    )
