"""
Tests for settings, startup validation and the service factory.

Tests cover:
- Production mode refuses to start without LLM keys
- Mock/production wiring chosen by ServiceFactory
"""

from unittest.mock import patch

import pytest

from roma.config import Settings
from roma.core.models import Chain
from roma.main import validate_production_config
from roma.services.explain.chat_completion_provider import ChatCompletionProvider
from roma.services.explain.mock_llm import MockLLMProvider
from roma.services.factory import ServiceFactory
from roma.services.token_data.birdeye_provider import BirdeyeTokenDataProvider
from roma.services.token_data.coingecko_provider import CoinGeckoTokenDataProvider
from roma.services.token_data.dexscreener_provider import DexScreenerTokenDataProvider
from roma.services.token_data.mock_provider import MockTokenDataProvider


@pytest.fixture
def production_settings() -> Settings:
    return Settings(
        environment="production",
        use_mock_services=False,
        groq_api_key="test-groq-key",
        fireworks_api_key="test-fireworks-key",
        _env_file=None,
    )


class TestSettings:
    """Tests for Settings key bookkeeping."""

    def test_missing_keys(self) -> None:
        settings = Settings(fireworks_api_key="k", birdeye_api_key="k", _env_file=None)

        assert settings.missing_llm_keys == ["GROQ_API_KEY"]
        assert "BIRDEYE_API_KEY" not in settings.missing_data_keys
        assert "SERPER_API_KEY" in settings.missing_data_keys


class TestProductionValidation:
    """Tests for validate_production_config."""

    def test_mock_mode_needs_no_keys(self, mock_settings: Settings) -> None:
        validate_production_config(mock_settings)

    def test_missing_llm_keys_raise(self) -> None:
        settings = Settings(use_mock_services=False, groq_api_key="k", _env_file=None)

        with pytest.raises(RuntimeError) as exc_info:
            validate_production_config(settings)

        assert "FIREWORKS_API_KEY" in str(exc_info.value)
        assert "GROQ_API_KEY" not in str(exc_info.value)

    def test_missing_data_keys_only_warn(self, production_settings: Settings) -> None:
        """Data source keys are optional; each gap is logged with its effect."""
        with patch("roma.main.logger") as mock_logger:
            validate_production_config(production_settings)

        lines = [c[0][0] for c in mock_logger.warning.call_args_list]
        assert len(lines) == len(production_settings.missing_data_keys) == 5
        assert (
            "BIRDEYE_API_KEY not set - Birdeye is left out of the Solana fallback chain"
            in lines
        )


class TestServiceFactory:
    """Tests for ServiceFactory wiring."""

    def test_mock_mode_uses_mocks(self, mock_factory: ServiceFactory) -> None:
        aggregator = mock_factory.create_token_data_aggregator()

        assert all(
            isinstance(p, MockTokenDataProvider) for p in aggregator.providers_for(Chain.BSC)
        )
        assert isinstance(mock_factory.create_insight_llm(), MockLLMProvider)
        assert isinstance(mock_factory.create_chat_llm(), MockLLMProvider)

    def test_production_fallback_chains(self, production_settings: Settings) -> None:
        factory = ServiceFactory(
            production_settings.model_copy(update={"birdeye_api_key": "test-birdeye-key"})
        )
        aggregator = factory.create_token_data_aggregator()

        solana = aggregator.providers_for(Chain.SOLANA)
        base = aggregator.providers_for(Chain.BASE)

        assert isinstance(solana[0], DexScreenerTokenDataProvider)
        assert isinstance(solana[1], BirdeyeTokenDataProvider)
        assert isinstance(base[0], DexScreenerTokenDataProvider)
        assert isinstance(base[1], CoinGeckoTokenDataProvider)

    def test_solana_chain_without_birdeye_key(self, production_settings: Settings) -> None:
        """Keyless Birdeye always fails, so it is not wired at all."""
        factory = ServiceFactory(production_settings)

        solana = factory.create_token_data_aggregator().providers_for(Chain.SOLANA)

        assert len(solana) == 1
        assert isinstance(solana[0], DexScreenerTokenDataProvider)

    def test_production_llms(self, production_settings: Settings) -> None:
        factory = ServiceFactory(production_settings)

        assert isinstance(factory.create_insight_llm(), ChatCompletionProvider)
        assert isinstance(factory.create_chat_llm(), ChatCompletionProvider)
