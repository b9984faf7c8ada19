"""
Pytest configuration and fixtures.

Provides reusable test fixtures for:
- Sample token data
- Mock services
- Test orchestrator and web application
"""

import pytest

from roma.config.settings import Settings
from roma.core.exceptions import NarratorUnavailable, ProviderError
from roma.core.models import Chain, ProvenanceTag, SentimentRecord, TokenRecord
from roma.services.crypto import CryptoService
from roma.services.explain.mock_llm import MockLLMProvider
from roma.services.explain.service import InsightNarrator
from roma.services.factory import ServiceFactory
from roma.services.orchestrator import AnalyzerOrchestrator
from roma.services.risk.liquidity import LiquidityLockService
from roma.services.risk.service import RiskService
from roma.services.security.mock_provider import MockSecurityProvider
from roma.services.security.service import SecurityService
from roma.services.social.aggregator import SocialHypeAggregator
from roma.services.token_data.aggregator import TokenDataAggregator
from roma.services.token_data.mock_provider import MockTokenDataProvider


class StaticTokenProvider:
    """TokenDataProvider returning a fixed record under a given tag."""

    def __init__(self, tag: ProvenanceTag, record: TokenRecord | None = None):
        self.name = tag
        self.record = record
        self.calls = 0

    async def get_token_data(self, address: str, chain: Chain) -> TokenRecord:
        self.calls += 1
        if self.record is None:
            raise ProviderError(self.name.value, status=503)
        return self.record.model_copy(update={"address": address, "chain": chain})


class RecordingLLMProvider(MockLLMProvider):
    """MockLLMProvider that keeps every message list it was sent."""

    def __init__(self, prefix: str = "[mock]"):
        super().__init__(prefix)
        self.calls: list[list[dict[str, str]]] = []

    async def complete(self, messages: list[dict[str, str]]) -> str:
        self.calls.append(messages)
        return await super().complete(messages)


class FailingLLMProvider:
    """LLMProvider whose endpoint is always down."""

    def __init__(self):
        self.calls = 0

    async def complete(self, messages: list[dict[str, str]]) -> str:
        self.calls += 1
        raise NarratorUnavailable(technical_message="endpoint down")


# =============================================================================
# Token Data Fixtures
# =============================================================================


@pytest.fixture
def risky_token() -> TokenRecord:
    """Small illiquid token that trips most risk rules."""
    return TokenRecord(
        address="RiskyToken111111111111111111111111111111111",
        chain=Chain.SOLANA,
        name="ScamCoin",
        symbol="SCAM",
        price=0.00005,
        price_change_24h=60,
        volume_24h=100,
        market_cap=50_000,
        liquidity=5_000,
        holders=0,
        source=ProvenanceTag.DEXSCREENER,
    )


@pytest.fixture
def healthy_token() -> TokenRecord:
    """Liquid, actively traded token that trips no risk rule."""
    return TokenRecord(
        address="HealthyToken1111111111111111111111111111111",
        chain=Chain.SOLANA,
        name="Bonk",
        symbol="BONK",
        price=0.001,
        price_change_24h=12.5,
        volume_24h=2_000_000,
        market_cap=20_000_000,
        liquidity=3_000_000,
        holders=0,
        source=ProvenanceTag.DEXSCREENER,
    )


@pytest.fixture
def neutral_sentiment() -> SentimentRecord:
    """Sentiment with score 50 (no sentiment contribution)."""
    return SentimentRecord(score=50, mentions=100, trending=False)


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def risk_service() -> RiskService:
    """RiskService with default thresholds."""
    return RiskService()


@pytest.fixture
def mock_token_provider() -> MockTokenDataProvider:
    """Mock token data provider."""
    return MockTokenDataProvider()


@pytest.fixture
def mock_llm_provider() -> RecordingLLMProvider:
    """Mock LLM provider that records the prompts it receives."""
    return RecordingLLMProvider()


@pytest.fixture
def token_aggregator(mock_token_provider: MockTokenDataProvider) -> TokenDataAggregator:
    """Token data aggregator with the mock provider on every chain."""
    return TokenDataAggregator({chain: [mock_token_provider] for chain in Chain})


@pytest.fixture
def narrator(mock_llm_provider: MockLLMProvider) -> InsightNarrator:
    """Narrator with mock LLMs."""
    return InsightNarrator(insight_llm=mock_llm_provider, chat_llm=mock_llm_provider)


@pytest.fixture
def crypto_service(
    token_aggregator: TokenDataAggregator,
    risk_service: RiskService,
    mock_token_provider: MockTokenDataProvider,
) -> CryptoService:
    """Crypto facade with mock providers and a fixed simulation seed."""
    return CryptoService(
        aggregator=token_aggregator,
        risk_service=risk_service,
        liquidity_service=LiquidityLockService(mock_token_provider),
        security_service=SecurityService(MockSecurityProvider()),
        social_aggregator=SocialHypeAggregator(mock_token_provider),
        seed=42,
    )


@pytest.fixture
def orchestrator(
    crypto_service: CryptoService,
    narrator: InsightNarrator,
) -> AnalyzerOrchestrator:
    """Fully configured orchestrator with mock services."""
    return AnalyzerOrchestrator(crypto=crypto_service, narrator=narrator)


@pytest.fixture
def mock_settings() -> Settings:
    """Settings in mock mode, ignoring any local .env file."""
    return Settings(use_mock_services=True, _env_file=None)


@pytest.fixture
def mock_factory(mock_settings: Settings) -> ServiceFactory:
    """ServiceFactory producing mock implementations."""
    return ServiceFactory(mock_settings)


@pytest.fixture
def static_provider():
    """Build a StaticTokenProvider; pass record=None for a provider that fails."""

    def build(tag: ProvenanceTag, record: TokenRecord | None = None) -> StaticTokenProvider:
        return StaticTokenProvider(tag, record)

    return build


@pytest.fixture
def failing_llm() -> FailingLLMProvider:
    """LLM provider that always raises NarratorUnavailable."""
    return FailingLLMProvider()


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def solana_address() -> str:
    """Solana mint address (BONK)."""
    return "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263"


@pytest.fixture
def evm_address() -> str:
    """Ethereum contract address (PEPE), mixed case."""
    return "0x6982508145454Ce325dDbE47a25d4ec3d2311933"
