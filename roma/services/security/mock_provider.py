"""
Mock GoPlus provider for development.

Returns deterministic GoPlus-shaped flags per (address, chain) so the
security scan runs without network access.
"""

from roma.core.models import Chain
from roma.services.security.goplus_provider import ZERO_ADDRESS
from roma.services.simulation import seeded_rng


class MockSecurityProvider:
    """SecurityProvider with seeded flags; drop-in for GoPlusSecurityProvider."""

    async def get_token_security(self, address: str, chain: Chain) -> dict:
        rng = seeded_rng("security", address, chain.value)

        def flag(probability: float) -> str:
            return "1" if rng.random() < probability else "0"

        renounced = rng.random() < 0.5
        return {
            "is_honeypot": flag(0.05),
            "hidden_owner": flag(0.1),
            "is_proxy": flag(0.1),
            "can_take_back_ownership": flag(0.1),
            "owner_change_balance": flag(0.05),
            "selfdestruct": flag(0.05),
            "is_open_source": flag(0.85),
            "owner_address": ZERO_ADDRESS if renounced else f"0x{rng.getrandbits(160):040x}",
        }
