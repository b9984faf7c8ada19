"""
Shared JSON-over-HTTP helper for provider adapters.

Every outbound call goes through fetch_json so that transport failures,
timeouts, non-2xx statuses and non-JSON bodies all surface as the same
ProviderError family. No retries: a failed provider is simply skipped
by whoever called it.
"""

import logging
from typing import Any

import aiohttp

from roma.core.exceptions import MalformedResponseError, ProviderError

logger = logging.getLogger(__name__)


async def fetch_json(
    provider: str,
    method: str,
    url: str,
    *,
    timeout: float,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
    json: Any = None,
) -> Any:
    """
    Perform one HTTP request and decode the JSON body.

    Args:
        provider: Provider identifier used in errors and logs
        method: HTTP method ("GET" / "POST")
        url: Request URL
        timeout: Total request timeout in seconds
        headers: Optional request headers
        params: Optional query parameters
        json: Optional JSON request body

    Returns:
        Decoded JSON payload

    Raises:
        ProviderError: On network failure, timeout or non-2xx status
        MalformedResponseError: If a 2xx body is not valid JSON
    """
    client_timeout = aiohttp.ClientTimeout(total=timeout)

    try:
        async with aiohttp.ClientSession() as session:
            async with session.request(
                method,
                url,
                headers=headers,
                params=params,
                json=json,
                timeout=client_timeout,
            ) as resp:
                if not 200 <= resp.status < 300:
                    logger.warning(f"{provider} returned {resp.status}")
                    raise ProviderError(provider, status=resp.status)

                try:
                    return await resp.json(content_type=None)
                except ValueError as e:
                    raise MalformedResponseError(
                        provider, technical_message=f"{provider}: invalid JSON: {e}"
                    ) from e

    except ProviderError:
        raise
    except TimeoutError:
        logger.warning(f"{provider} timeout after {timeout}s")
        raise ProviderError(
            provider, technical_message=f"{provider}: timeout after {timeout}s"
        ) from None
    except aiohttp.ClientError as e:
        logger.warning(f"{provider} request failed: {e}")
        raise ProviderError(
            provider, technical_message=f"{provider}: {type(e).__name__}: {e}"
        ) from e
