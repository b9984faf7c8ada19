"""
Fixed user-facing strings.

All warning, risk, note and apology texts that appear in API responses
are defined here so that scorers, tests and the dashboard agree on them.

Naming convention:
- RISK_WARNING_* - RiskRecord.warnings entries
- SECURITY_RISK_* - SecurityRecord.risks entries
- SOCIAL_NOTE_* - SocialHypeRecord.notes entries
- PRICE_ACTION_* - TechnicalRecord.price_action texts
- ERROR_* / CHAT_* - error and fallback messages
"""

# =============================================================================
# Risk assessment
# =============================================================================

RISK_WARNING_LOW_LIQUIDITY = "Very low liquidity - high slippage risk"
RISK_WARNING_LOW_MARKET_CAP = "Low market cap - highly volatile"
RISK_WARNING_LOW_VOLUME = "Low trading volume - potential liquidity issues"
RISK_WARNING_VOLATILITY = "Extreme price volatility detected"

# =============================================================================
# Contract security
# =============================================================================

SECURITY_RISK_HONEYPOT = "CRITICAL: Honeypot detected - cannot sell"
SECURITY_RISK_HIDDEN_OWNER = "Hidden owner or proxy contract detected"
SECURITY_RISK_MINT = "Owner can mint new tokens"
SECURITY_RISK_NOT_RENOUNCED = "Ownership not renounced"
SECURITY_RISK_UNVERIFIED = "Contract not verified"
SECURITY_RISK_UNKNOWN = "Unable to verify contract security - proceed with caution"

# =============================================================================
# Technical analysis
# =============================================================================

PRICE_ACTION_BULLISH = "Strong upward momentum with increasing volume"
PRICE_ACTION_BEARISH = "Downward pressure with selling activity"
PRICE_ACTION_NEUTRAL = "Consolidating in current range"

# =============================================================================
# Social data
# =============================================================================

SOCIAL_NOTE_COINGECKO_UNAVAILABLE = "CoinGecko data unavailable - using alternative sources"
SOCIAL_NOTE_SEARCH_UNAVAILABLE = "ODS unavailable - using Serper API"
SOCIAL_NOTE_SERPER_FAILED = "Limited social data available - results may be incomplete"
SOCIAL_NOTE_TWITTER_ESTIMATED = "Twitter mentions estimated from volume and Reddit activity"
SOCIAL_NOTE_NO_ACTIVITY = "No social activity detected - token may be very new or unlisted"
SOCIAL_NOTE_FOLLOWER_ESTIMATES = "Using follower-based estimates from CoinGecko"

# =============================================================================
# Errors and fallbacks
# =============================================================================

ERROR_INVALID_ACTION = "Invalid action"
ERROR_GENERIC = "Internal server error"
ERROR_SOCIAL_DATA = "Failed to fetch social data"
ERROR_MISSING_SOCIAL_PARAMS = "Missing symbol or address"
ERROR_MISSING_FIELD = "Missing required field: {field}"

CHAT_APOLOGY = (
    "Yo, my API connection is acting up. "
    "Try asking again in a sec, or maybe rephrase your question."
)
