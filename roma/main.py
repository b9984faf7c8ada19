"""
Dashboard API entry point.

Loads settings, configures logging, wires services through
ServiceFactory and serves the aiohttp application until cancelled.

Run with: python -m roma.main  (or the roma-dashboard console script)
"""

import asyncio
import logging
import sys

from aiohttp import web

from roma.config import Settings, get_settings
from roma.services.factory import ServiceFactory
from roma.web.app import create_app

logger = logging.getLogger(__name__)

MISSING_DATA_KEY_EFFECTS = {
    "COINGECKO_API_KEY": "CoinGecko runs on the keyless public rate limit",
    "BIRDEYE_API_KEY": "Birdeye is left out of the Solana fallback chain",
    "SERPER_API_KEY": "Serper search and reddit metrics are skipped",
    "TAVILY_API_KEY": "Tavily search fallback is skipped",
    "TWITTER_BEARER_TOKEN": "tweet counts on the social-hype endpoint are zero",
}


def setup_logging(level: str) -> None:
    """
    Send log records to stdout in a single pipe-separated format.

    Args:
        level: Root level name (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    # aiohttp logs every access line at INFO; our middleware already does
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)


def validate_production_config(settings: Settings) -> None:
    """
    Refuse to start without LLM keys when real services are enabled.

    Data source keys are optional; each missing one is logged with
    what the service does without it.

    Raises:
        RuntimeError: If GROQ_API_KEY or FIREWORKS_API_KEY is unset.
    """
    if settings.use_mock_services:
        return

    missing = settings.missing_llm_keys
    if missing:
        raise RuntimeError(
            f"Cannot start with real services, unset: {', '.join(missing)}. "
            f"Use USE_MOCK_SERVICES=true to run without API keys."
        )

    for name in settings.missing_data_keys:
        logger.warning(f"{name} not set - {MISSING_DATA_KEY_EFFECTS[name]}")


async def serve(settings: Settings) -> None:
    """Run the HTTP server until the task is cancelled."""
    app = create_app(ServiceFactory(settings))

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.host, settings.port)
    await site.start()

    logger.info(f"Listening on http://{settings.host}:{settings.port}")

    try:
        await asyncio.Event().wait()
    finally:
        logger.info("Stopping HTTP server...")
        await runner.cleanup()


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    validate_production_config(settings)

    logger.info(
        f"ROMA dashboard API starting (environment={settings.environment}, "
        f"mock={settings.use_mock_services})"
    )
    await serve(settings)


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nServer stopped by user.")


if __name__ == "__main__":
    run()
