"""Pure derived views of market data."""

from roma.services.signals.exit_strategy import calculate_exit_strategy, position_size_band
from roma.services.signals.prediction import predict_price
from roma.services.signals.technical import analyze_technical

__all__ = [
    "analyze_technical",
    "calculate_exit_strategy",
    "position_size_band",
    "predict_price",
]
