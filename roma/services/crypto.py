"""
Crypto service facade.

One coroutine per dashboard data action. Each method delegates to the
service that owns the computation; the facade only adapts arguments.

Actions:
- fetch_token_data       → TokenDataAggregator
- analyze_sentiment      → simulated (seeded)
- analyze_technical      → signals.technical
- assess_risk            → RiskService
- fetch_whale_activity   → simulated (seeded)
- analyze_social_hype    → SocialHypeAggregator
- check_liquidity_lock   → LiquidityLockService
- scan_contract_security → SecurityService
- calculate_exit_strategy → signals.exit_strategy
- find_similar_tokens    → simulated (seeded)
- predict_price          → signals.prediction
"""

from roma.core.models import (
    Chain,
    ExitStrategyRecord,
    LiquidityLockRecord,
    PricePoint,
    PricePredictionRecord,
    RiskRecord,
    SecurityRecord,
    SentimentRecord,
    SimilarTokenRecord,
    SocialHypeRecord,
    TechnicalRecord,
    TokenRecord,
    WhaleActivityRecord,
)
from roma.services.risk.liquidity import LiquidityLockService
from roma.services.risk.service import RiskService
from roma.services.security.service import SecurityService
from roma.services.signals.exit_strategy import calculate_exit_strategy
from roma.services.signals.prediction import predict_price
from roma.services.signals.technical import analyze_technical
from roma.services.simulation import (
    simulate_price_history,
    simulate_sentiment,
    simulate_similar_tokens,
    simulate_whale_activity,
)
from roma.services.social.aggregator import SocialHypeAggregator
from roma.services.token_data.aggregator import TokenDataAggregator


class CryptoService:
    """
    Facade over the data and scoring services.

    Usage:
        crypto = factory.create_crypto_service()
        token = await crypto.fetch_token_data(address, Chain.SOLANA)
        risk = await crypto.assess_risk(token)
    """

    def __init__(
        self,
        aggregator: TokenDataAggregator,
        risk_service: RiskService,
        liquidity_service: LiquidityLockService,
        security_service: SecurityService,
        social_aggregator: SocialHypeAggregator,
        seed: int | None = None,
    ):
        """
        Args:
            aggregator: Market data fallback chain
            risk_service: Risk scorer
            liquidity_service: Liquidity lock heuristic
            security_service: Contract security scan
            social_aggregator: Social hype merger
            seed: Fixed seed for simulated data (None seeds from the address)
        """
        self._aggregator = aggregator
        self._risk_service = risk_service
        self._liquidity_service = liquidity_service
        self._security_service = security_service
        self._social_aggregator = social_aggregator
        self._seed = seed

    async def fetch_token_data(self, address: str, chain: Chain) -> TokenRecord:
        return await self._aggregator.get_token_data(address, chain)

    async def analyze_sentiment(self, address: str, chain: Chain) -> SentimentRecord:
        return simulate_sentiment(address, chain, seed=self._seed)

    async def analyze_technical(self, token: TokenRecord) -> TechnicalRecord:
        return analyze_technical(token)

    async def assess_risk(self, token: TokenRecord) -> RiskRecord:
        return self._risk_service.assess_risk(token)

    async def fetch_whale_activity(self, address: str, chain: Chain) -> WhaleActivityRecord:
        return simulate_whale_activity(address, chain, seed=self._seed)

    async def analyze_social_hype(self, address: str, symbol: str) -> SocialHypeRecord:
        return await self._social_aggregator.analyze(address, symbol)

    async def check_liquidity_lock(self, address: str, chain: Chain) -> LiquidityLockRecord:
        return await self._liquidity_service.check(address, chain)

    async def scan_contract_security(self, address: str, chain: Chain) -> SecurityRecord:
        return await self._security_service.scan(address, chain)

    async def calculate_exit_strategy(self, token: TokenRecord) -> ExitStrategyRecord:
        return calculate_exit_strategy(token)

    async def find_similar_tokens(self, token: TokenRecord) -> list[SimilarTokenRecord]:
        return simulate_similar_tokens(token, seed=self._seed)

    async def predict_price(
        self, token: TokenRecord, sentiment: SentimentRecord
    ) -> PricePredictionRecord:
        return predict_price(token, sentiment)

    async def fetch_price_history(self, token: TokenRecord) -> list[PricePoint]:
        """Simulated 7-day history (used by the analysis report)."""
        return simulate_price_history(token, seed=self._seed)
