"""
Exit strategy calculator.

Fixed multiplier targets, a three-step take-profit ladder and a
position-size band chosen by market cap. No external data.
"""

from roma.core.models import ExitStrategyRecord, ExitTarget, TakeProfitLevel, TokenRecord

TARGET_MULTIPLIERS = (2, 5, 10, 50, 100)

# (label, percent of position, multiplier)
TAKE_PROFIT_LADDER = (
    ("First Target", 25, 2),
    ("Second Target", 25, 5),
    ("Moon Bag", 50, 10),
)


def position_size_band(market_cap: float) -> str:
    """Suggested position size for a market cap."""
    if market_cap < 100_000:
        return "0.5-1% of portfolio (high risk)"
    if market_cap < 1_000_000:
        return "1-2% of portfolio (medium risk)"
    if market_cap > 10_000_000:
        return "2-5% of portfolio (lower risk)"
    return "1-2% of portfolio"


def calculate_exit_strategy(token: TokenRecord) -> ExitStrategyRecord:
    """
    Build exit targets for the token's current price and market cap.

    Example: market cap 100k, price 0.001, 10x ⇒ target price 0.01, "900%".
    """
    targets = [
        ExitTarget(
            multiplier=m,
            target_mc=token.market_cap * m,
            target_price=token.price * m,
            potential_return=f"{(m - 1) * 100}%",
        )
        for m in TARGET_MULTIPLIERS
    ]

    ladder = [
        TakeProfitLevel(level=label, percentage=pct, price=token.price * m)
        for label, pct, m in TAKE_PROFIT_LADDER
    ]

    return ExitStrategyRecord(
        current_market_cap=token.market_cap,
        targets=targets,
        suggested_take_profit=ladder,
        risk_adjusted_size=position_size_band(token.market_cap),
    )
