"""Risk services."""

from roma.services.risk.liquidity import LiquidityLockService, infer_liquidity_lock
from roma.services.risk.service import RiskService, RiskThresholds

__all__ = ["RiskService", "RiskThresholds", "LiquidityLockService", "infer_liquidity_lock"]
