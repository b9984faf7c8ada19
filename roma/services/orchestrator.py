"""
Analysis orchestrator.

Coordinates a full token analysis without containing business logic.
Calls the services in dashboard order and collects one AnalysisReport.

Workflow:
1. Token data        → data insight
2. Sentiment         → sentiment insight
3. Technical         → technical insight
4. Risk              → risk insight
5. Security scan, liquidity lock, social hype (concurrently)
6. Exit strategy, prediction, whale activity, similar tokens, price history
7. Meta summary insight
"""

import asyncio
import logging
from collections.abc import Callable

from roma.core.models import (
    AgentInsight,
    AgentKind,
    AnalysisReport,
    Chain,
    RiskRecord,
    SentimentRecord,
    TechnicalRecord,
    TokenRecord,
)
from roma.services.crypto import CryptoService
from roma.services.explain.service import InsightNarrator

logger = logging.getLogger(__name__)

# Timeline confidence for fixed-confidence agents
DATA_CONFIDENCE = 95
TECHNICAL_CONFIDENCE = 88
META_CONFIDENCE = 92


def meta_summary(
    token: TokenRecord,
    sentiment: SentimentRecord,
    technical: TechnicalRecord,
    risk: RiskRecord,
) -> str:
    """Closing timeline message."""
    if risk.score < 30:
        level = "low"
    elif risk.score < 60:
        level = "moderate"
    else:
        level = "high"
    outlook = "Currently trending!" if sentiment.trending else "Monitor for opportunities."
    return (
        f"Analysis complete! {token.symbol} shows {technical.trend} trend "
        f"with {level} risk. {outlook}"
    )


class AnalyzerOrchestrator:
    """
    Orchestrates the token analysis workflow.

    Each step is delegated to a specialized service:
    - Data and scores → CryptoService
    - Commentary → InsightNarrator

    Usage:
        orchestrator = AnalyzerOrchestrator(crypto, narrator)
        report = await orchestrator.analyze("So111...", Chain.SOLANA)
    """

    def __init__(self, crypto: CryptoService, narrator: InsightNarrator):
        """
        Args:
            crypto: Facade over data providers and scorers
            narrator: LLM commentary service
        """
        self._crypto = crypto
        self._narrator = narrator

    async def analyze(
        self,
        address: str,
        chain: Chain,
        is_current: Callable[[], bool] | None = None,
    ) -> AnalysisReport | None:
        """
        Run the full analysis pipeline.

        Args:
            address: Token address (opaque)
            chain: Blockchain
            is_current: Checked after every stage; when it returns False
                the run stops and None is returned

        Returns:
            AnalysisReport, or None if the run was superseded

        Raises:
            AllProvidersExhausted: If token data cannot be fetched
        """
        still_current = is_current or (lambda: True)
        crypto = self._crypto
        narrator = self._narrator
        insights: list[AgentInsight] = []

        logger.info(f"Starting analysis for {address[:8]}... on {chain.value}")

        token = await crypto.fetch_token_data(address, chain)
        text = await narrator.generate_agent_insight("data", token.to_json())
        if not still_current():
            return None
        insights.append(AgentInsight(agent_kind=AgentKind.DATA, text=text, confidence=DATA_CONFIDENCE))

        sentiment = await crypto.analyze_sentiment(address, chain)
        text = await narrator.generate_agent_insight("sentiment", sentiment.to_json())
        if not still_current():
            return None
        insights.append(
            AgentInsight(agent_kind=AgentKind.SENTIMENT, text=text, confidence=sentiment.score)
        )

        technical = await crypto.analyze_technical(token)
        technical_context = {**technical.to_json(), "priceChange24h": token.price_change_24h}
        text = await narrator.generate_agent_insight("technical", technical_context)
        if not still_current():
            return None
        insights.append(
            AgentInsight(agent_kind=AgentKind.TECHNICAL, text=text, confidence=TECHNICAL_CONFIDENCE)
        )

        risk = await crypto.assess_risk(token)
        text = await narrator.generate_agent_insight("risk", risk.to_json())
        if not still_current():
            return None
        insights.append(
            AgentInsight(agent_kind=AgentKind.RISK, text=text, confidence=100 - risk.score)
        )

        security, liquidity_lock, social_hype = await asyncio.gather(
            crypto.scan_contract_security(address, chain),
            crypto.check_liquidity_lock(address, chain),
            crypto.analyze_social_hype(address, token.name),
        )
        if not still_current():
            return None

        exit_strategy = await crypto.calculate_exit_strategy(token)
        prediction = await crypto.predict_price(token, sentiment)
        whale_activity = await crypto.fetch_whale_activity(address, chain)
        similar_tokens = await crypto.find_similar_tokens(token)
        price_history = await crypto.fetch_price_history(token)

        insights.append(
            AgentInsight(
                agent_kind=AgentKind.META,
                text=meta_summary(token, sentiment, technical, risk),
                confidence=META_CONFIDENCE,
            )
        )

        logger.info(
            f"Analysis complete for {token.symbol}: risk {risk.score}/100, "
            f"security {security.security_score}/100, hype {social_hype.hype_score}/100"
        )

        return AnalysisReport(
            token_data=token,
            sentiment=sentiment,
            technical=technical,
            risk=risk,
            security=security,
            liquidity_lock=liquidity_lock,
            social_hype=social_hype,
            exit_strategy=exit_strategy,
            prediction=prediction,
            whale_activity=whale_activity,
            similar_tokens=similar_tokens,
            price_history=price_history,
            insights=insights,
        )


class AnalysisSession:
    """
    One dashboard session.

    Starting a new run supersedes the one in flight: the older run stops
    at its next stage boundary, its results are never applied, and its
    run() call returns None.

    Usage:
        session = AnalysisSession(orchestrator)
        report = await session.run(address, Chain.SOLANA)
    """

    def __init__(self, orchestrator: AnalyzerOrchestrator):
        self._orchestrator = orchestrator
        self._run_id = 0
        self.report: AnalysisReport | None = None

    @property
    def run_id(self) -> int:
        """Identity of the most recent run."""
        return self._run_id

    async def run(self, address: str, chain: Chain) -> AnalysisReport | None:
        """
        Analyze a token, superseding any earlier run.

        Returns:
            The report, or None if a newer run started meanwhile
        """
        self._run_id += 1
        run_id = self._run_id

        report = await self._orchestrator.analyze(
            address, chain, is_current=lambda: run_id == self._run_id
        )

        if report is None or run_id != self._run_id:
            logger.info(f"Analysis run {run_id} superseded, discarding results")
            return None

        self.report = report
        return report
