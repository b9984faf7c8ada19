"""
HTTP routes.

POST /api/crypto        action dispatch over CryptoService
POST /api/ai            narrator dispatch (agent insight, chat)
GET  /api/social-hype   Twitter/Reddit activity summary
POST /api/analysis      full analysis report
GET  /health            liveness check

Errors raised here are turned into JSON responses by error_middleware.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from aiohttp import web
from pydantic import ValidationError

from roma.core.exceptions import InvalidActionError, RomaError
from roma.core.models import (
    Chain,
    ChatContext,
    ChatMessage,
    RecordModel,
    SentimentRecord,
    TokenRecord,
)
from roma.services.crypto import CryptoService
from roma.services.explain.service import InsightNarrator
from roma.services.orchestrator import AnalyzerOrchestrator
from roma.services.social.analytics import SocialAnalyticsService
from roma.templates.messages import (
    ERROR_MISSING_FIELD,
    ERROR_MISSING_SOCIAL_PARAMS,
    ERROR_SOCIAL_DATA,
)

logger = logging.getLogger(__name__)

UNKNOWN_TOKEN_NAME = "Unknown Token"


def _to_json(result: RecordModel | list[RecordModel]) -> Any:
    if isinstance(result, list):
        return [item.to_json() for item in result]
    return result.to_json()


async def _read_body(request: web.Request) -> dict[str, Any]:
    try:
        body = await request.json()
    except ValueError as e:
        raise RomaError("Invalid JSON body", technical_message=f"Invalid JSON body: {e}") from e
    if not isinstance(body, dict):
        raise RomaError("Invalid JSON body", technical_message="JSON body is not an object")
    return body


def _require(body: dict[str, Any], field: str) -> Any:
    value = body.get(field)
    if value is None or value == "":
        raise RomaError(ERROR_MISSING_FIELD.format(field=field))
    return value


def _chain(body: dict[str, Any]) -> Chain:
    value = _require(body, "chain")
    try:
        return Chain(value)
    except ValueError:
        raise RomaError(f"Unsupported chain: {value}") from None


def _record(model: type[RecordModel], body: dict[str, Any], field: str) -> Any:
    data = _require(body, field)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise RomaError(
            f"Invalid {field}", technical_message=f"Invalid {field}: {e}"
        ) from e


class ApiRoutes:
    """
    Dashboard API routes.

    Usage:
        routes = ApiRoutes(crypto, narrator, analytics, orchestrator)
        routes.setup_routes(app)
    """

    def __init__(
        self,
        crypto: CryptoService,
        narrator: InsightNarrator,
        analytics: SocialAnalyticsService,
        orchestrator: AnalyzerOrchestrator,
    ):
        self._crypto = crypto
        self._narrator = narrator
        self._analytics = analytics
        self._orchestrator = orchestrator

        self._crypto_actions: dict[str, Callable[[dict[str, Any]], Awaitable[Any]]] = {
            "fetchTokenData": self._fetch_token_data,
            "analyzeSentiment": self._analyze_sentiment,
            "analyzeTechnical": self._analyze_technical,
            "assessRisk": self._assess_risk,
            "fetchWhaleActivity": self._fetch_whale_activity,
            "analyzeSocialHype": self._analyze_social_hype,
            "checkLiquidityLock": self._check_liquidity_lock,
            "scanContractSecurity": self._scan_contract_security,
            "calculateExitStrategy": self._calculate_exit_strategy,
            "findSimilarTokens": self._find_similar_tokens,
            "predictPrice": self._predict_price,
        }

    def setup_routes(self, app: web.Application) -> None:
        app.router.add_post("/api/crypto", self.crypto)
        app.router.add_post("/api/ai", self.ai)
        app.router.add_get("/api/social-hype", self.social_hype)
        app.router.add_post("/api/analysis", self.analysis)
        app.router.add_get("/health", self.health)
        logger.info("API routes configured")

    # =========================================================================
    # Handlers
    # =========================================================================

    async def crypto(self, request: web.Request) -> web.Response:
        """Dispatch a data action to CryptoService."""
        body = await _read_body(request)
        action = body.get("action")
        logger.info(f"Received crypto action: {action}")

        handler = self._crypto_actions.get(action) if isinstance(action, str) else None
        if handler is None:
            raise InvalidActionError(action)

        result = await handler(body)
        return web.json_response(_to_json(result))

    async def ai(self, request: web.Request) -> web.Response:
        """Dispatch a narrator action."""
        body = await _read_body(request)
        action = body.get("action")
        logger.info(f"Received AI action: {action}")

        if action == "generateAgentInsight":
            context = body.get("context")
            insight = await self._narrator.generate_agent_insight(
                str(body.get("agent") or ""),
                context if isinstance(context, dict) else {},
            )
            return web.json_response({"insight": insight})

        if action == "chatWithDobby":
            user_message = str(_require(body, "userMessage"))
            token_context = (
                _record(ChatContext, body, "tokenContext") if body.get("tokenContext") else None
            )
            history = self._history(body.get("conversationHistory"))
            reply = await self._narrator.chat(user_message, token_context, history)
            return web.json_response({"response": reply})

        raise InvalidActionError(action)

    async def social_hype(self, request: web.Request) -> web.Response:
        """Twitter/Reddit activity for ?symbol=&address=."""
        symbol = request.query.get("symbol")
        address = request.query.get("address")

        if not symbol or not address:
            return web.json_response({"error": ERROR_MISSING_SOCIAL_PARAMS}, status=400)

        try:
            data = await self._analytics.calculate_social_hype(symbol, address)
        except Exception as e:
            logger.exception(f"Social hype API error: {e}")
            return web.json_response({"error": ERROR_SOCIAL_DATA}, status=500)

        return web.json_response(data.to_json())

    async def analysis(self, request: web.Request) -> web.Response:
        """Run the full analysis pipeline for {address, chain}."""
        body = await _read_body(request)
        address = str(_require(body, "address"))
        chain = _chain(body)

        report = await self._orchestrator.analyze(address, chain)
        return web.json_response(report.to_json())

    async def health(self, request: web.Request) -> web.Response:
        return web.json_response({"status": "ok"})

    # =========================================================================
    # Crypto actions
    # =========================================================================

    async def _fetch_token_data(self, body: dict[str, Any]) -> TokenRecord:
        return await self._crypto.fetch_token_data(str(_require(body, "address")), _chain(body))

    async def _analyze_sentiment(self, body: dict[str, Any]) -> SentimentRecord:
        return await self._crypto.analyze_sentiment(str(_require(body, "address")), _chain(body))

    async def _analyze_technical(self, body: dict[str, Any]):
        return await self._crypto.analyze_technical(_record(TokenRecord, body, "tokenData"))

    async def _assess_risk(self, body: dict[str, Any]):
        return await self._crypto.assess_risk(_record(TokenRecord, body, "tokenData"))

    async def _fetch_whale_activity(self, body: dict[str, Any]):
        return await self._crypto.fetch_whale_activity(
            str(_require(body, "address")), _chain(body)
        )

    async def _analyze_social_hype(self, body: dict[str, Any]):
        token_data = body.get("tokenData")
        token_name = token_data.get("name") if isinstance(token_data, dict) else None
        symbol = body.get("tokenName") or token_name or UNKNOWN_TOKEN_NAME
        return await self._crypto.analyze_social_hype(str(_require(body, "address")), str(symbol))

    async def _check_liquidity_lock(self, body: dict[str, Any]):
        return await self._crypto.check_liquidity_lock(
            str(_require(body, "address")), _chain(body)
        )

    async def _scan_contract_security(self, body: dict[str, Any]):
        return await self._crypto.scan_contract_security(
            str(_require(body, "address")), _chain(body)
        )

    async def _calculate_exit_strategy(self, body: dict[str, Any]):
        return await self._crypto.calculate_exit_strategy(_record(TokenRecord, body, "tokenData"))

    async def _find_similar_tokens(self, body: dict[str, Any]):
        return await self._crypto.find_similar_tokens(_record(TokenRecord, body, "tokenData"))

    async def _predict_price(self, body: dict[str, Any]):
        return await self._crypto.predict_price(
            _record(TokenRecord, body, "tokenData"),
            _record(SentimentRecord, body, "sentiment"),
        )

    @staticmethod
    def _history(raw: Any) -> list[dict[str, str]]:
        """Validate conversation history turns; malformed turns are dropped."""
        if not isinstance(raw, list):
            return []

        history = []
        for turn in raw:
            try:
                message = ChatMessage.model_validate(turn)
            except ValidationError:
                logger.debug(f"Dropping malformed history turn: {turn!r}")
                continue
            history.append(message.model_dump())
        return history
