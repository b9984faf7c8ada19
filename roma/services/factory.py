"""
Service factory for dependency injection.

Creates and configures all services based on application settings.
Switches between mock and real implementations automatically.

This is the single point of service creation - API keys and timeouts
reach providers only through this factory.
"""

import logging

from roma.config.settings import Settings
from roma.core.models import Chain
from roma.core.protocols import LLMProvider, TokenDataProvider
from roma.services.crypto import CryptoService
from roma.services.explain.chat_completion_provider import (
    FIREWORKS_API_URL,
    GROQ_API_URL,
    ChatCompletionProvider,
)
from roma.services.explain.mock_llm import MockLLMProvider
from roma.services.explain.service import InsightNarrator
from roma.services.orchestrator import AnalyzerOrchestrator
from roma.services.risk.liquidity import LiquidityLockService
from roma.services.risk.service import RiskService
from roma.services.security.goplus_provider import GoPlusSecurityProvider
from roma.services.security.mock_provider import MockSecurityProvider
from roma.services.security.service import SecurityService
from roma.services.social.aggregator import SocialHypeAggregator
from roma.services.social.analytics import SocialAnalyticsService
from roma.services.social.deep_search import DeepSearchClient
from roma.services.token_data.aggregator import TokenDataAggregator
from roma.services.token_data.birdeye_provider import BirdeyeTokenDataProvider
from roma.services.token_data.coingecko_provider import CoinGeckoTokenDataProvider
from roma.services.token_data.dexscreener_provider import DexScreenerTokenDataProvider
from roma.services.token_data.mock_provider import MockTokenDataProvider

logger = logging.getLogger(__name__)

INSIGHT_TEMPERATURE = 0.7
INSIGHT_MAX_TOKENS = 200
CHAT_TEMPERATURE = 0.9
CHAT_MAX_TOKENS = 300


class ServiceFactory:
    """
    Factory for creating application services.

    Reads configuration and creates appropriate service implementations:
    - Mock implementations for development (USE_MOCK_SERVICES=true)
    - Real implementations for production (USE_MOCK_SERVICES=false)

    Usage:
        factory = ServiceFactory(settings)
        crypto = factory.create_crypto_service()
    """

    def __init__(self, settings: Settings):
        """
        Initialize factory with application settings.

        Args:
            settings: Application configuration
        """
        self._settings = settings
        self._log_mode()

    def _log_mode(self) -> None:
        """Log the current mode for debugging."""
        mode = "MOCK" if self._settings.use_mock_services else "PRODUCTION"
        logger.info(f"ServiceFactory initialized in {mode} mode")

    @property
    def _mock(self) -> bool:
        return self._settings.use_mock_services

    @property
    def _timeout(self) -> float:
        return self._settings.api_timeout_seconds

    def create_market_data_provider(self) -> TokenDataProvider:
        """
        Create the primary market data provider (DexScreener).

        Also backs the liquidity lock check and social volume lookup.
        """
        if self._mock:
            logger.debug("Creating MockTokenDataProvider")
            return MockTokenDataProvider()

        logger.debug("Creating DexScreenerTokenDataProvider")
        return DexScreenerTokenDataProvider(timeout=self._timeout)

    def create_coingecko_provider(self) -> CoinGeckoTokenDataProvider:
        return CoinGeckoTokenDataProvider(
            api_key=self._settings.coingecko_api_key,
            timeout=self._timeout,
        )

    def create_token_data_aggregator(self) -> TokenDataAggregator:
        """
        Create the market data fallback chain.

        Production order: DexScreener, then Birdeye on Solana (only with
        a Birdeye key) or CoinGecko on EVM chains.
        """
        primary = self.create_market_data_provider()

        if self._mock:
            return TokenDataAggregator({chain: [primary] for chain in Chain})

        coingecko = self.create_coingecko_provider()
        solana: list[TokenDataProvider] = [primary]

        # Birdeye rejects keyless requests; CoinGecko serves them rate-limited
        if self._settings.birdeye_api_key:
            solana.append(
                BirdeyeTokenDataProvider(
                    api_key=self._settings.birdeye_api_key,
                    timeout=self._timeout,
                )
            )
        else:
            logger.info("BIRDEYE_API_KEY not set - Solana chain uses DexScreener only")

        logger.debug("Creating TokenDataAggregator")
        return TokenDataAggregator(
            {
                Chain.SOLANA: solana,
                Chain.ETHEREUM: [primary, coingecko],
                Chain.BSC: [primary, coingecko],
                Chain.BASE: [primary, coingecko],
            }
        )

    def create_risk_service(self) -> RiskService:
        """
        Create risk calculation service.

        Risk service uses the same logic for both mock and production.
        """
        logger.debug("Creating RiskService")
        return RiskService()

    def create_liquidity_service(self) -> LiquidityLockService:
        return LiquidityLockService(self.create_market_data_provider())

    def create_security_service(self) -> SecurityService:
        if self._mock:
            logger.debug("Creating SecurityService with MockSecurityProvider")
            return SecurityService(MockSecurityProvider())

        logger.debug("Creating SecurityService with GoPlusSecurityProvider")
        return SecurityService(GoPlusSecurityProvider(timeout=self._timeout))

    def create_deep_search_client(self) -> DeepSearchClient:
        return DeepSearchClient(
            serper_api_key=self._settings.serper_api_key,
            tavily_api_key=self._settings.tavily_api_key,
            timeout=self._timeout,
        )

    def create_social_aggregator(self) -> SocialHypeAggregator:
        """
        Create the social hype merger.

        In mock mode only the (mock) volume lookup is wired, so twitter
        activity is always estimated.
        """
        volume_provider = self.create_market_data_provider()

        if self._mock:
            return SocialHypeAggregator(volume_provider, timeout=self._timeout)

        return SocialHypeAggregator(
            volume_provider,
            community=self.create_coingecko_provider(),
            deep_search=self.create_deep_search_client(),
            serper_api_key=self._settings.serper_api_key,
            timeout=self._timeout,
        )

    def create_social_analytics(self) -> SocialAnalyticsService:
        """Create the social-hype endpoint service (zeros in mock mode)."""
        if self._mock:
            return SocialAnalyticsService(timeout=self._timeout)

        return SocialAnalyticsService(
            twitter_bearer_token=self._settings.twitter_bearer_token,
            serper_api_key=self._settings.serper_api_key,
            tavily_api_key=self._settings.tavily_api_key,
            timeout=self._timeout,
        )

    def create_insight_llm(self) -> LLMProvider:
        if self._mock:
            logger.debug("Creating MockLLMProvider for insights")
            return MockLLMProvider()

        logger.debug("Creating Groq ChatCompletionProvider")
        return ChatCompletionProvider(
            GROQ_API_URL,
            api_key=self._settings.groq_api_key,
            model=self._settings.groq_model,
            temperature=INSIGHT_TEMPERATURE,
            max_tokens=INSIGHT_MAX_TOKENS,
            timeout=self._timeout,
            name="groq",
        )

    def create_chat_llm(self) -> LLMProvider:
        if self._mock:
            logger.debug("Creating MockLLMProvider for chat")
            return MockLLMProvider(prefix="[mock dobby]")

        logger.debug("Creating Fireworks ChatCompletionProvider")
        return ChatCompletionProvider(
            FIREWORKS_API_URL,
            api_key=self._settings.fireworks_api_key,
            model=self._settings.fireworks_model,
            temperature=CHAT_TEMPERATURE,
            max_tokens=CHAT_MAX_TOKENS,
            timeout=self._timeout,
            name="fireworks",
        )

    def create_narrator(self) -> InsightNarrator:
        logger.debug("Creating InsightNarrator")
        return InsightNarrator(
            insight_llm=self.create_insight_llm(),
            chat_llm=self.create_chat_llm(),
        )

    def create_crypto_service(self) -> CryptoService:
        """Create the facade behind the crypto action endpoint."""
        return CryptoService(
            aggregator=self.create_token_data_aggregator(),
            risk_service=self.create_risk_service(),
            liquidity_service=self.create_liquidity_service(),
            security_service=self.create_security_service(),
            social_aggregator=self.create_social_aggregator(),
        )

    def create_orchestrator(self) -> AnalyzerOrchestrator:
        """
        Create the full-analysis orchestrator.

        Creates all dependencies automatically.
        """
        logger.info("Creating AnalyzerOrchestrator with all dependencies")
        return AnalyzerOrchestrator(
            crypto=self.create_crypto_service(),
            narrator=self.create_narrator(),
        )
