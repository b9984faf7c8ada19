"""
Environment-driven configuration for the dashboard API.

Values come from process env vars or a local .env file (pydantic-settings).
Nothing outside ServiceFactory reads these: keys and timeouts are handed
to each provider when it is built.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Dashboard API settings.

    Every field maps to the upper-cased env var of the same name
    (see .env.example). Defaults run the service in mock mode.

    Attributes:
        environment: development or production
        use_mock_services: Serve mock market data and canned LLM replies
        log_level: Root logging level
        host: Interface the HTTP server binds to
        port: HTTP server port
        api_timeout_seconds: Per-request timeout for outbound calls
        coingecko_api_key: CoinGecko demo key (EVM fallback, community stats)
        birdeye_api_key: Birdeye key (Solana fallback)
        serper_api_key: Serper key (mention search, reddit metrics)
        tavily_api_key: Tavily key (search fallback)
        twitter_bearer_token: Twitter v2 bearer token for recent tweet counts
        groq_api_key: Groq key for agent insights
        groq_model: Groq model id
        fireworks_api_key: Fireworks key for the chat assistant
        fireworks_model: Fireworks model id
    """

    environment: Literal["development", "production"] = "development"
    use_mock_services: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    host: str = "0.0.0.0"
    port: int = 8080
    api_timeout_seconds: float = 10.0

    # Optional: without a key Birdeye is left out of the Solana chain,
    # CoinGecko runs keyless and search or Twitter sources return nothing
    coingecko_api_key: str = ""
    birdeye_api_key: str = ""
    serper_api_key: str = ""
    tavily_api_key: str = ""
    twitter_bearer_token: str = ""

    # Required outside mock mode
    groq_api_key: str = ""
    groq_model: str = "llama-3.3-70b-versatile"
    fireworks_api_key: str = ""
    fireworks_model: str = (
        "accounts/sentientfoundation/models/dobby-unhinged-llama-3-3-70b-new"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    @property
    def missing_llm_keys(self) -> list[str]:
        """Env var names of unset LLM keys."""
        keys = {"GROQ_API_KEY": self.groq_api_key, "FIREWORKS_API_KEY": self.fireworks_api_key}
        return [name for name, value in keys.items() if not value]

    @property
    def missing_data_keys(self) -> list[str]:
        """Env var names of unset data source keys."""
        keys = {
            "COINGECKO_API_KEY": self.coingecko_api_key,
            "BIRDEYE_API_KEY": self.birdeye_api_key,
            "SERPER_API_KEY": self.serper_api_key,
            "TAVILY_API_KEY": self.tavily_api_key,
            "TWITTER_BEARER_TOKEN": self.twitter_bearer_token,
        }
        return [name for name, value in keys.items() if not value]


@lru_cache
def get_settings() -> Settings:
    """Settings read once per process."""
    return Settings()
