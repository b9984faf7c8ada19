"""
Narrator prompts and fallback templates.

Agent insight prompts read a loose context dict (the camelCase record
JSON the dashboard sends); missing keys read as 0 / empty.
The chat assistant gets a full text summary of whatever analysis
sections are present in its ChatContext.
"""

from collections.abc import Mapping
from typing import Any

from roma.core.models import ChatContext
from roma.utils.formatters import (
    format_number,
    format_price,
    format_risk_badge,
    format_sentiment_label,
    format_signed_percent,
    format_trend_arrow,
)
from roma.utils.numbers import to_number

SYSTEM_PROMPTS = {
    "data": (
        "You are a Data Collector agent analyzing memecoin on-chain data. "
        "Be concise and factual. Focus on key metrics."
    ),
    "sentiment": (
        "You are a Sentiment Analyzer agent tracking social media buzz. "
        "Be enthusiastic but honest about community sentiment."
    ),
    "technical": (
        "You are a Technical Analyst agent reading charts and patterns. "
        "Use trading terminology and be analytical."
    ),
    "risk": (
        "You are a Risk Assessor agent identifying dangers. "
        "Be cautious and highlight red flags clearly."
    ),
}

DOBBY_PERSONA = (
    "You are Dobby, an unhinged but brilliant memecoin advisor. "
    "You're blunt, sometimes rude, but always honest and helpful. "
    "You give straight talk about crypto investments without sugar-coating."
)

DOBBY_INSTRUCTION = (
    "Based on this analysis, answer the user's questions with specific insights and data."
)

HISTORY_TURNS = 6


def _plain(value: Any) -> str:
    """Render a context value for a prompt (integral floats without .0)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _warnings(context: Mapping[str, Any]) -> list[str]:
    warnings = context.get("warnings")
    return [str(w) for w in warnings] if isinstance(warnings, list) else []


def system_prompt(agent: str) -> str:
    """Role instruction for an agent; unknown agents get the data role."""
    return SYSTEM_PROMPTS.get(agent, SYSTEM_PROMPTS["data"])


def build_insight_prompt(agent: str, context: Mapping[str, Any]) -> str:
    """User prompt asking for a 1-2 sentence insight."""
    get = context.get

    if agent == "data":
        return (
            f"Analyze this memecoin data: Price: ${_plain(get('price'))}, "
            f"Market Cap: ${_plain(get('marketCap'))}, "
            f"Volume: ${_plain(get('volume24h'))}, "
            f"Liquidity: ${_plain(get('liquidity'))}. "
            "Give a brief insight in 1-2 sentences."
        )
    if agent == "sentiment":
        return (
            f"This memecoin has {_plain(get('mentions'))} social mentions with a "
            f"sentiment score of {_plain(get('score'))}/100. Is it trending? "
            "Give insight in 1-2 sentences."
        )
    if agent == "technical":
        return (
            f"Price change 24h: {_plain(get('priceChange24h'))}%, "
            f"Trend: {get('trend')}, Volume trend: {get('volumeTrend')}. "
            "Provide technical analysis in 1-2 sentences."
        )
    if agent == "risk":
        return (
            f"Risk score: {_plain(get('score'))}/100, "
            f"Rug pull risk: {_plain(get('rugPullRisk'))}, "
            f"Warnings: {', '.join(_warnings(context))}. "
            "Assess the risk in 1-2 sentences."
        )
    return "Analyze this memecoin."


def fallback_insight(agent: str, context: Mapping[str, Any]) -> str:
    """Deterministic insight used when the LLM is unavailable."""
    if agent == "data":
        return (
            f"Found token data: ${_plain(context.get('price', 0))} price with "
            f"${format_number(to_number(context.get('volume24h')))} daily volume. "
            f"Market cap is ${format_number(to_number(context.get('marketCap')))}."
        )

    if agent == "sentiment":
        score = to_number(context.get("score"))
        if score > 60:
            mood = "positive"
        elif score > 40:
            mood = "neutral"
        else:
            mood = "negative"
        return (
            f"Detected {_plain(context.get('mentions', 0))} social mentions "
            f"with {mood} sentiment overall."
        )

    if agent == "technical":
        change = to_number(context.get("priceChange24h"))
        direction = "up" if change > 0 else "down"
        trend = context.get("trend")
        if trend == "bullish":
            verdict = "Bullish momentum detected."
        elif trend == "bearish":
            verdict = "Bearish pressure present."
        else:
            verdict = "Sideways movement."
        return f"Price is {direction} {abs(change):.2f}% in 24h. {verdict}"

    if agent == "risk":
        warnings = _warnings(context)
        detail = warnings[0] if warnings else "Standard risk factors detected."
        return f"Risk score: {_plain(context.get('score', 0))}/100. {detail}"

    return "Analysis complete."


def build_context_summary(context: ChatContext) -> str:
    """Text summary of every analysis section present in the chat context."""
    sections = ["COMPLETE TOKEN ANALYSIS:"]

    token = context.token_data
    if token is not None:
        sections.append(
            "Basic Info:\n"
            f"- Name: {token.name} ({token.symbol})\n"
            f"- Chain: {token.chain.value.upper()}\n"
            f"- Contract: {token.address}\n"
            f"- Price: ${format_price(token.price)}\n"
            f"- Market Cap: ${format_number(token.market_cap)}\n"
            f"- 24h Change: {format_signed_percent(token.price_change_24h)}\n"
            f"- Volume 24h: ${format_number(token.volume_24h)}\n"
            f"- Liquidity: ${format_number(token.liquidity)}\n"
            f"- Holders: {format_number(token.holders)}"
        )

    sentiment = context.sentiment
    if sentiment is not None:
        sections.append(
            "Sentiment Analysis:\n"
            f"- Overall Score: {sentiment.score}/100 "
            f"({format_sentiment_label(sentiment.score)})\n"
            f"- Social Mentions: {format_number(sentiment.mentions)}\n"
            f"- Trending: {'YES - Hot right now!' if sentiment.trending else 'No'}"
        )

    technical = context.technical
    if technical is not None:
        sections.append(
            "Technical Analysis:\n"
            f"- Trend: {technical.trend.upper()} {format_trend_arrow(technical.trend)}\n"
            f"- Volume Trend: {technical.volume_trend}\n"
            f"- Price Action: {technical.price_action}"
        )

    risk = context.risk
    if risk is not None:
        if risk.warnings:
            warning_line = f"- ⚠️ WARNINGS: {'; '.join(risk.warnings)}"
        else:
            warning_line = "- No major warnings"
        sections.append(
            "Risk Assessment:\n"
            f"- Overall Risk Score: {risk.score}/100 {format_risk_badge(risk.score)}\n"
            f"- Rug Pull Risk: {risk.rug_pull_risk}/100\n"
            f"- Honeypot Risk: {risk.honeypot_risk}/100\n"
            f"{warning_line}"
        )

    security = context.security
    if security is not None:
        sections.append(
            "Contract Security:\n"
            f"- Security Score: {security.security_score}/100\n"
            f"- Honeypot: {'YES' if security.is_honeypot else 'No'}\n"
            f"- Hidden Owner/Proxy: {'YES' if security.has_hidden_fees else 'No'}\n"
            f"- Can Mint: {'YES' if security.can_mint else 'No'}\n"
            f"- Ownership Renounced: {'Yes' if security.ownership_renounced else 'No'}\n"
            f"- Risks: {'; '.join(security.risks) if security.risks else 'None found'}"
        )

    lock = context.liquidity_lock
    if lock is not None:
        sections.append(
            "Liquidity Lock:\n"
            f"- Likely Locked: {'Yes' if lock.is_locked else 'No'} "
            f"({lock.confidence} confidence, source: {lock.data_source.value})\n"
            f"- Locked Amount: ${format_number(lock.locked_amount)} "
            f"({lock.locked_percentage:.1f}% of market cap)"
        )

    hype = context.social_hype
    if hype is not None:
        telegram = (
            format_number(hype.telegram_members) if hype.telegram_members else "n/a"
        )
        sections.append(
            "Social Hype:\n"
            f"- Hype Score: {hype.hype_score}/100 ({hype.trending_velocity})\n"
            f"- Twitter Mentions 24h: {hype.twitter_mentions_24h} "
            f"({hype.data_sources.twitter.value})\n"
            f"- Reddit Posts 24h: {hype.reddit_posts_24h} "
            f"({hype.data_sources.reddit.value})\n"
            f"- Telegram Members: {telegram}\n"
            f"- Organic: {'Yes' if hype.is_organic else 'No'}, "
            f"Data Quality: {hype.data_quality}"
        )

    exit_strategy = context.exit_strategy
    if exit_strategy is not None:
        targets = ", ".join(
            f"{t.multiplier}x @ ${format_price(t.target_price)}"
            for t in exit_strategy.targets
        )
        sections.append(
            "Exit Strategy:\n"
            f"- Targets: {targets}\n"
            f"- Suggested Position Size: {exit_strategy.risk_adjusted_size}"
        )

    prediction = context.prediction
    if prediction is not None:
        p24 = prediction.prediction_24h
        p7 = prediction.prediction_7d
        sections.append(
            "Price Prediction:\n"
            f"- 24h: {format_signed_percent(p24.change)} "
            f"(${format_price(p24.price)}, {p24.confidence}% confidence)\n"
            f"- 7d: {format_signed_percent(p7.change)} "
            f"(${format_price(p7.price)}, {p7.confidence}% confidence)\n"
            f"- Factors: {', '.join(prediction.factors)}"
        )

    if len(sections) == 1:
        return ""
    return "\n\n".join(sections)


def build_chat_messages(
    user_message: str,
    context: ChatContext | None,
    history: list[dict[str, str]],
) -> list[dict[str, str]]:
    """System persona + context, the last 6 history turns, then the user message."""
    summary = build_context_summary(context) if context is not None else ""
    system = f"{DOBBY_PERSONA}\n\n{summary}\n\n{DOBBY_INSTRUCTION}"

    messages = [{"role": "system", "content": system}]
    messages.extend(
        {"role": turn["role"], "content": turn["content"]}
        for turn in history[-HISTORY_TURNS:]
    )
    messages.append({"role": "user", "content": user_message})
    return messages
