"""
Text formatters for narrator prompts and fallback templates.

Numbers are rendered the way the dashboard shows them: thousands
separators, at most three fraction digits, signed percentages.
"""


def format_number(value: float) -> str:
    """
    Format a number with thousands separators.

    Integers keep no decimals; other values keep up to three.

    Examples:
        >>> format_number(1234567)
        '1,234,567'
        >>> format_number(1234.56789)
        '1,234.568'
    """
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_price(value: float) -> str:
    """Format a token price with 8 decimals (memecoin prices are tiny)."""
    return f"{value:.8f}"


def format_signed_percent(value: float) -> str:
    """
    Format a percentage change with an explicit plus sign.

    Examples:
        >>> format_signed_percent(12.345)
        '+12.35%'
        >>> format_signed_percent(-3)
        '-3.00%'
    """
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.2f}%"


def format_risk_badge(score: int) -> str:
    """
    Format a compact risk badge for a 0-100 risk score.

    Returns:
        Badge like "🔴 HIGH RISK"
    """
    if score > 70:
        return "🔴 HIGH RISK"
    if score > 40:
        return "🟡 MEDIUM RISK"
    return "🟢 LOW RISK"


def format_sentiment_label(score: int) -> str:
    """Human label for a 0-100 sentiment score."""
    if score > 70:
        return "Very Positive"
    if score > 50:
        return "Positive"
    if score > 30:
        return "Neutral"
    return "Negative"


def format_trend_arrow(trend: str) -> str:
    """Arrow emoji for a technical trend."""
    return {"bullish": "📈", "bearish": "📉"}.get(trend, "➡️")
