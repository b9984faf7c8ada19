"""
Simulated dashboard data.

Sentiment, whale activity, comparable tokens and the 7-day price history
have no real provider behind them. They are generated from a random
generator seeded with the token address (or an explicit seed), so the
same inputs always produce the same output.
"""

import hashlib
import random
from datetime import datetime, timedelta, timezone

from roma.core.models import (
    Chain,
    PricePoint,
    SentimentRecord,
    SentimentSource,
    SimilarTokenRecord,
    TokenRecord,
    WhaleActivityRecord,
    WhaleHolder,
    WhaleTransaction,
)

WHALE_ALERT_USD = 10_000


def seeded_rng(*parts: str, seed: int | None = None) -> random.Random:
    """
    Create a deterministic generator.

    Args:
        parts: Strings hashed into the seed (typically address, chain)
        seed: Explicit seed; overrides parts when given

    Returns:
        random.Random instance
    """
    if seed is None:
        digest = hashlib.md5(":".join(parts).encode()).hexdigest()
        seed = int(digest, 16) % (2**32)
    return random.Random(seed)


def _hex_address(rng: random.Random, bits: int = 160) -> str:
    return f"0x{rng.getrandbits(bits):0{bits // 4}x}"


def simulate_sentiment(
    address: str, chain: Chain, seed: int | None = None
) -> SentimentRecord:
    """Placeholder sentiment: score 0-99, mentions 0-9999."""
    rng = seeded_rng("sentiment", address, chain.value, seed=seed)

    score = rng.randrange(100)
    mentions = rng.randrange(10_000)

    if score > 60:
        twitter_sentiment = "positive"
    elif score > 40:
        twitter_sentiment = "neutral"
    else:
        twitter_sentiment = "negative"

    return SentimentRecord(
        score=score,
        mentions=mentions,
        trending=score > 70 and mentions > 1000,
        sources=[
            SentimentSource(
                platform="Twitter",
                sentiment=twitter_sentiment,
                url=f"https://twitter.com/search?q={address}",
            ),
            SentimentSource(
                platform="Reddit",
                sentiment="positive" if score > 50 else "neutral",
                url=f"https://reddit.com/search?q={address}",
            ),
        ],
    )


def simulate_whale_activity(
    address: str,
    chain: Chain,
    now: datetime | None = None,
    seed: int | None = None,
) -> WhaleActivityRecord:
    """
    Placeholder whale snapshot: 10 top holders and 5 trades in the last hour.

    Timestamps are offsets from `now`; everything else depends only on the seed.
    """
    rng = seeded_rng("whales", address, chain.value, seed=seed)
    now = now or datetime.now(timezone.utc)

    holders = [
        WhaleHolder(
            address=_hex_address(rng),
            balance=rng.uniform(0, 1_000_000),
            percentage=rng.uniform(0, 15),
        )
        for _ in range(10)
    ]
    holders.sort(key=lambda h: h.balance, reverse=True)

    transactions = []
    for _ in range(5):
        side = "buy" if rng.random() > 0.5 else "sell"
        amount = rng.uniform(0, 100_000)
        usd_value = rng.uniform(0, 50_000)
        when = now - timedelta(seconds=rng.uniform(0, 3600))
        transactions.append(
            WhaleTransaction(
                type=side,
                amount=amount,
                usd_value=usd_value,
                timestamp=when.isoformat(),
                tx_hash=_hex_address(rng, bits=256),
            )
        )
    transactions.sort(key=lambda t: t.timestamp, reverse=True)

    return WhaleActivityRecord(
        top_holders=holders,
        recent_transactions=transactions,
        whale_alert=any(t.usd_value > WHALE_ALERT_USD for t in transactions),
    )


def simulate_similar_tokens(
    token: TokenRecord, seed: int | None = None
) -> list[SimilarTokenRecord]:
    """Five comparable tokens, most similar first."""
    rng = seeded_rng("similar", token.address, token.chain.value, seed=seed)

    tokens = []
    for i in range(1, 6):
        outcome = rng.choice(["success", "failed", "active"])
        max_mc = token.market_cap * (rng.random() * 50 + 1)

        if outcome == "failed":
            current_mc = 0.0
            roi = -100.0
        elif outcome == "success":
            current_mc = max_mc
            roi = rng.random() * 1000
        else:
            current_mc = max_mc * rng.random()
            roi = rng.random() * 200

        tokens.append(
            SimilarTokenRecord(
                address=_hex_address(rng),
                name=f"Similar Token {i}",
                symbol=f"SIM{i}",
                similarity=rng.randint(70, 99),
                outcome=outcome,
                max_market_cap=max_mc,
                current_market_cap=current_mc,
                roi=roi,
            )
        )

    tokens.sort(key=lambda t: t.similarity, reverse=True)
    return tokens


def simulate_price_history(
    token: TokenRecord,
    now: datetime | None = None,
    seed: int | None = None,
) -> list[PricePoint]:
    """Seven daily points jittered ±10% (price) and ±20% (volume) around today."""
    rng = seeded_rng("history", token.address, token.chain.value, seed=seed)
    now = now or datetime.now(timezone.utc)

    points = []
    for days_ago in range(6, -1, -1):
        day = now - timedelta(days=days_ago)
        points.append(
            PricePoint(
                date=f"{day:%b} {day.day}",
                price=token.price * (1 + (rng.random() - 0.5) * 0.2),
                volume=token.volume_24h * (0.8 + rng.random() * 0.4),
            )
        )
    return points
