"""
Contract security scoring.

Start at 100 and subtract a fixed penalty per red flag:
- honeypot                    -50
- hidden owner / proxy        -20
- owner can mint              -15
- ownership not renounced     -10 (only when an owner address is known)
- source not verified         -15

The score is floored at 0. Each penalty appends its risk description.
When GoPlus cannot be reached, a conservative fallback record is returned.
"""

import logging

from roma.core.exceptions import ProviderError
from roma.core.models import Chain, SecurityRecord
from roma.core.protocols import SecurityProvider
from roma.services.security.goplus_provider import ZERO_ADDRESS
from roma.templates.messages import (
    SECURITY_RISK_HIDDEN_OWNER,
    SECURITY_RISK_HONEYPOT,
    SECURITY_RISK_MINT,
    SECURITY_RISK_NOT_RENOUNCED,
    SECURITY_RISK_UNKNOWN,
    SECURITY_RISK_UNVERIFIED,
)

logger = logging.getLogger(__name__)

FALLBACK_SECURITY_SCORE = 65


def _flag(entry: dict, key: str) -> bool:
    return entry.get(key) == "1"


def score_security(entry: dict) -> SecurityRecord:
    """
    Build a SecurityRecord from GoPlus flags.

    Args:
        entry: GoPlus token security entry

    Returns:
        SecurityRecord with score floored at 0
    """
    is_honeypot = _flag(entry, "is_honeypot") or entry.get("is_honeypot") is True
    has_hidden_fees = _flag(entry, "hidden_owner") or _flag(entry, "is_proxy")
    can_mint = _flag(entry, "can_take_back_ownership") or _flag(entry, "owner_change_balance")
    can_burn = _flag(entry, "selfdestruct")
    owner_address = entry.get("owner_address")
    ownership_renounced = owner_address == ZERO_ADDRESS

    risks: list[str] = []
    score = 100

    if is_honeypot:
        risks.append(SECURITY_RISK_HONEYPOT)
        score -= 50
    if has_hidden_fees:
        risks.append(SECURITY_RISK_HIDDEN_OWNER)
        score -= 20
    if can_mint:
        risks.append(SECURITY_RISK_MINT)
        score -= 15
    if not ownership_renounced and owner_address:
        risks.append(SECURITY_RISK_NOT_RENOUNCED)
        score -= 10
    if entry.get("is_open_source") == "0":
        risks.append(SECURITY_RISK_UNVERIFIED)
        score -= 15

    return SecurityRecord(
        is_honeypot=is_honeypot,
        has_hidden_fees=has_hidden_fees,
        can_mint=can_mint,
        can_burn=can_burn,
        ownership_renounced=ownership_renounced,
        security_score=max(0, score),
        risks=risks,
    )


def fallback_security() -> SecurityRecord:
    """Conservative record used when the scan is unavailable."""
    return SecurityRecord(
        is_honeypot=False,
        has_hidden_fees=False,
        can_mint=False,
        can_burn=False,
        ownership_renounced=False,
        security_score=FALLBACK_SECURITY_SCORE,
        risks=[SECURITY_RISK_UNKNOWN],
    )


class SecurityService:
    """
    Scans a contract and scores it.

    Usage:
        service = SecurityService(GoPlusSecurityProvider())
        security = await service.scan(address, chain)
    """

    def __init__(self, provider: SecurityProvider):
        self._provider = provider

    async def scan(self, address: str, chain: Chain) -> SecurityRecord:
        """Scan contract security; never raises."""
        logger.info(f"Scanning contract security for {address[:8]}... on {chain.value}")

        try:
            entry = await self._provider.get_token_security(address, chain)
        except ProviderError as e:
            logger.warning(f"Security scan unavailable, using fallback: {e}")
            return fallback_security()

        record = score_security(entry)
        logger.info(f"Security scan complete - Score: {record.security_score}/100")
        return record
