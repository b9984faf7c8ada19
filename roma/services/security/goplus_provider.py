"""
GoPlus token security provider.

Fetches the raw token security flags for one contract. Interpretation
of the flags lives in SecurityService.
"""

import logging

from roma.core.exceptions import MalformedResponseError, ProviderError
from roma.core.models import Chain
from roma.services.http import fetch_json

logger = logging.getLogger(__name__)

GOPLUS_TOKEN_SECURITY_URL = "https://api.gopluslabs.io/api/v1/token_security"

DEFAULT_TIMEOUT = 10.0

# Chain -> GoPlus chain id. GoPlus has no Solana endpoint here; it falls
# back to the Ethereum id like any unknown chain.
CHAIN_IDS = {
    Chain.ETHEREUM: "1",
    Chain.BSC: "56",
    Chain.BASE: "8453",
}
DEFAULT_CHAIN_ID = "1"

PROVIDER = "goplus"

# owner_address of a renounced contract
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class GoPlusSecurityProvider:
    """Raw contract security flags from GoPlus."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        """
        Args:
            timeout: Request timeout in seconds
        """
        self._timeout = timeout

    async def get_token_security(self, address: str, chain: Chain) -> dict:
        """
        Fetch the security entry for a contract.

        Returns:
            GoPlus flag dict (string "0"/"1" values, owner_address, ...)

        Raises:
            ProviderError: On API failure or when GoPlus has no entry
        """
        chain_id = CHAIN_IDS.get(chain, DEFAULT_CHAIN_ID)

        data = await fetch_json(
            PROVIDER,
            "GET",
            f"{GOPLUS_TOKEN_SECURITY_URL}/{chain_id}",
            timeout=self._timeout,
            params={"contract_addresses": address},
        )

        if not isinstance(data, dict):
            raise MalformedResponseError(PROVIDER)

        result = data.get("result") or {}
        entry = result.get(address.lower()) if isinstance(result, dict) else None
        if not isinstance(entry, dict):
            raise ProviderError(
                PROVIDER, technical_message=f"{PROVIDER}: no security data for {address}"
            )

        return entry
