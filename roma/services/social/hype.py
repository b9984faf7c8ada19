"""
Hype scoring and twitter mention estimation.

Pure functions: identical inputs always give identical outputs.
"""

import math
from dataclasses import dataclass
from typing import Literal

ESTIMATE_MIN = 1
ESTIMATE_MAX = 500


@dataclass(frozen=True)
class HypeScore:
    """Composite hype score with its derived labels."""

    score: int
    velocity: Literal["accelerating", "stable", "declining"]
    is_organic: bool


def address_hash(address: str) -> int:
    """Sum of the address's character codes."""
    return sum(ord(ch) for ch in address)


def estimate_twitter_mentions(address: str, volume_24h: float, reddit_posts: int) -> int:
    """
    Deterministic twitter mention estimate.

    With reddit activity, twitter is scaled from it by a 2.0-4.9 factor;
    otherwise it grows with log10(volume) scaled by a 0.8-1.19 factor.
    Both factors come from the address hash. Result clamped to [1, 500].
    """
    h = address_hash(address)

    if reddit_posts > 0:
        multiplier = 2 + (h % 30) / 10
        estimate = math.floor(reddit_posts * multiplier)
    else:
        factor = 0.8 + (h % 40) / 100
        estimate = math.floor(math.log10(max(volume_24h, 1)) * 3 * factor)

    return max(ESTIMATE_MIN, min(ESTIMATE_MAX, estimate))


def calculate_hype(
    twitter_mentions: int,
    reddit_posts: int,
    telegram_members: int | None = None,
) -> HypeScore:
    """
    Combine channel counts into a 0-100 hype score.

    twitter contributes up to 50 (saturating at 200 mentions), reddit up
    to 30 (at 30 posts), telegram up to 20 (at 5000 members).
    """
    normalized_twitter = min(50, twitter_mentions / 200 * 50)
    normalized_reddit = min(30, reddit_posts / 30 * 30)
    normalized_telegram = (
        min(20, telegram_members / 5000 * 20) if telegram_members else 0
    )

    score = math.floor(normalized_twitter + normalized_reddit + normalized_telegram)

    if score > 60 and twitter_mentions > 50 and reddit_posts > 5:
        velocity = "accelerating"
    elif score < 20 or (twitter_mentions < 5 and reddit_posts < 2):
        velocity = "declining"
    else:
        velocity = "stable"

    balanced = twitter_mentions > 0 and reddit_posts > 0
    not_excessive = score < 85 and twitter_mentions < 1000

    return HypeScore(score=score, velocity=velocity, is_organic=balanced and not_excessive)
