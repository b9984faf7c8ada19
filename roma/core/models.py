"""
Pydantic models for the ROMA dashboard API.

All data structures exchanged between providers, scorers, the narrator
and the HTTP layer are defined here. Every record is request-scoped:
created fresh per analysis and discarded after the response is sent.

Field names are snake_case in Python and camelCase on the wire
(``model_dump(by_alias=True)``), matching the dashboard's JSON contract.
Incoming JSON may use either form.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


def _camel(name: str) -> str:
    """price_change_24h -> priceChange24h (digits stay lowercase)."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class RecordModel(BaseModel):
    """Base model with camelCase wire aliases."""

    model_config = {
        "alias_generator": _camel,
        "populate_by_name": True,
        "from_attributes": True,
    }

    def to_json(self) -> dict:
        """Serialize for an API response (camelCase, None fields dropped)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# =============================================================================
# Enums
# =============================================================================


class Chain(str, Enum):
    """Supported chains. Addresses are opaque and validated downstream."""

    SOLANA = "solana"
    ETHEREUM = "ethereum"
    BSC = "bsc"
    BASE = "base"


class ProvenanceTag(str, Enum):
    """
    Which provider supplied a group of values.

    Attached per data category (market data, twitter, reddit, telegram),
    never per individual field.
    """

    DEXSCREENER = "dexscreener"
    BIRDEYE = "birdeye"
    COINGECKO = "coingecko"
    OPENDEEPSEARCH = "opendeepsearch"
    SERPER = "serper"
    ESTIMATED = "estimated"
    UNAVAILABLE = "unavailable"


class AgentKind(str, Enum):
    """Narrator roles shown on the agent timeline."""

    DATA = "data"
    SENTIMENT = "sentiment"
    TECHNICAL = "technical"
    RISK = "risk"
    META = "meta"


# =============================================================================
# Market data
# =============================================================================


class TokenRecord(RecordModel):
    """
    Normalized token market data.

    Produced by exactly one provider per request; never merged from two.
    Missing numerics are normalized to 0, missing strings to sentinels.
    """

    address: str
    chain: Chain
    name: str = "Unknown Token"
    symbol: str = "???"
    price: float = Field(default=0.0, ge=0)
    price_change_24h: float = 0.0
    volume_24h: float = 0.0
    market_cap: float = 0.0
    liquidity: float = Field(default=0.0, ge=0)
    holders: int = Field(default=0, ge=0)
    created_at: str = ""

    source: ProvenanceTag | None = None
    """Provider that produced this record (set by the aggregator)"""


class SentimentSource(RecordModel):
    platform: str
    sentiment: Literal["positive", "neutral", "negative"]
    url: str


class SentimentRecord(RecordModel):
    """Simulated social sentiment (placeholder, deterministic per address)."""

    score: int = Field(ge=0, le=100)
    mentions: int = Field(ge=0)
    trending: bool = False
    sources: list[SentimentSource] = Field(default_factory=list)


class TechnicalRecord(RecordModel):
    """Technical view derived from a TokenRecord only."""

    trend: Literal["bullish", "bearish", "neutral"]
    volume_trend: Literal["increasing", "decreasing", "stable"]
    price_action: str
    support: float
    resistance: float


class RiskRecord(RecordModel):
    """Additive rule-based risk assessment."""

    score: int = Field(ge=0, le=100)
    rug_pull_risk: int = Field(ge=0)
    honeypot_risk: int = Field(ge=0)
    liquidity_locked: bool
    contract_verified: bool = True
    warnings: list[str] = Field(default_factory=list)


class LiquidityLockRecord(RecordModel):
    """
    Inferred liquidity lock status.

    Placeholder policy: DexScreener does not report locks, the status is
    guessed from liquidity size and liquidity/market-cap ratio.
    """

    is_locked: bool
    locked_amount: float
    locked_percentage: float
    unlock_date: str | None = None
    lock_provider: str | None = None
    data_source: ProvenanceTag
    confidence: Literal["high", "medium", "low"]


class SecurityRecord(RecordModel):
    """Contract security scan result."""

    is_honeypot: bool
    has_hidden_fees: bool
    can_mint: bool
    can_burn: bool
    ownership_renounced: bool
    security_score: int = Field(ge=0, le=100)
    risks: list[str] = Field(default_factory=list)


# =============================================================================
# Derived views
# =============================================================================


class ExitTarget(RecordModel):
    multiplier: int
    target_mc: float = Field(alias="targetMC")
    target_price: float
    potential_return: str


class TakeProfitLevel(RecordModel):
    level: str
    percentage: int
    price: float


class ExitStrategyRecord(RecordModel):
    """Multiplier targets and a take-profit ladder for the current price."""

    current_market_cap: float
    targets: list[ExitTarget]
    suggested_take_profit: list[TakeProfitLevel]
    risk_adjusted_size: str


class PredictionWindow(RecordModel):
    price: float
    change: float
    confidence: int


class PricePredictionRecord(RecordModel):
    """Linear-combination price outlook for 24h and 7d."""

    prediction_24h: PredictionWindow
    prediction_7d: PredictionWindow
    factors: list[str]


class WhaleHolder(RecordModel):
    address: str
    balance: float
    percentage: float


class WhaleTransaction(RecordModel):
    type: Literal["buy", "sell"]
    amount: float
    usd_value: float
    timestamp: str
    tx_hash: str


class WhaleActivityRecord(RecordModel):
    """Simulated holder and transaction snapshot."""

    top_holders: list[WhaleHolder]
    recent_transactions: list[WhaleTransaction]
    whale_alert: bool


class SimilarTokenRecord(RecordModel):
    """Simulated comparable token with its outcome."""

    address: str
    name: str
    symbol: str
    similarity: int
    outcome: Literal["success", "failed", "active"]
    max_market_cap: float
    current_market_cap: float
    roi: float


class PricePoint(RecordModel):
    """One day of the simulated 7-day price history."""

    date: str
    price: float
    volume: float


# =============================================================================
# Social data
# =============================================================================


class SocialDataSources(RecordModel):
    twitter: ProvenanceTag = ProvenanceTag.UNAVAILABLE
    reddit: ProvenanceTag = ProvenanceTag.UNAVAILABLE
    telegram: ProvenanceTag = ProvenanceTag.UNAVAILABLE


class SocialHypeRecord(RecordModel):
    """Merged social activity with per-channel provenance."""

    twitter_mentions_24h: int = Field(ge=0)
    reddit_posts_24h: int = Field(ge=0)
    telegram_members: int | None = None
    trending_velocity: Literal["accelerating", "stable", "declining"]
    hype_score: int = Field(ge=0, le=100)
    is_organic: bool
    data_sources: SocialDataSources
    data_quality: Literal["high", "medium", "low"]
    notes: list[str] | None = None


class SearchResult(RecordModel):
    title: str = ""
    url: str = ""
    snippet: str = ""
    date: str | None = None
    relevance_score: float = 1.0


class TokenMentions(RecordModel):
    """Deep-search hits per channel for a token keyword."""

    twitter: list[SearchResult] = Field(default_factory=list)
    reddit: list[SearchResult] = Field(default_factory=list)
    news: list[SearchResult] = Field(default_factory=list)

    @property
    def total_mentions(self) -> int:
        return len(self.twitter) + len(self.reddit) + len(self.news)


class TwitterMetrics(RecordModel):
    mentions: int = 0
    recent_tweets: int = 0
    sentiment: Literal["positive", "neutral", "negative"] = "neutral"
    trending_score: int = 0


class RedditMetrics(RecordModel):
    posts: int = 0
    comments: int = 0
    sentiment: Literal["bullish", "neutral", "bearish"] = "neutral"


class SocialHypeData(RecordModel):
    """Shape returned by GET /api/social-hype."""

    twitter: TwitterMetrics
    reddit: RedditMetrics
    hype_score: int
    velocity: Literal["rising", "stable", "declining"]
    quality: Literal["real", "estimated"]


# =============================================================================
# Narrator and analysis run
# =============================================================================


class AgentInsight(RecordModel):
    """One narrator message on the analysis timeline. Never persisted."""

    agent_kind: AgentKind
    text: str
    confidence: int


class ChatMessage(BaseModel):
    role: str
    content: str


class ChatContext(RecordModel):
    """
    Token context sent with a chat message.

    Every section is optional: the dashboard sends whatever it has
    already computed.
    """

    token_data: TokenRecord | None = None
    sentiment: SentimentRecord | None = None
    technical: TechnicalRecord | None = None
    risk: RiskRecord | None = None
    security: SecurityRecord | None = None
    exit_strategy: ExitStrategyRecord | None = None
    prediction: PricePredictionRecord | None = None
    social_hype: SocialHypeRecord | None = None
    liquidity_lock: LiquidityLockRecord | None = None


class AnalysisReport(RecordModel):
    """Everything one analysis run produced, in chat-context shape."""

    token_data: TokenRecord
    sentiment: SentimentRecord
    technical: TechnicalRecord
    risk: RiskRecord
    security: SecurityRecord
    liquidity_lock: LiquidityLockRecord
    social_hype: SocialHypeRecord
    exit_strategy: ExitStrategyRecord
    prediction: PricePredictionRecord
    whale_activity: WhaleActivityRecord
    similar_tokens: list[SimilarTokenRecord]
    price_history: list[PricePoint]
    insights: list[AgentInsight]
