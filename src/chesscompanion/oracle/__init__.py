"""Move oracles: suggestion services and the Qt worker bridge."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscompanion.oracle.base import (
    MAX_STRENGTH,
    MIN_STRENGTH,
    IMoveOracle,
    OracleError,
    clamp_strength,
)
from chesscompanion.oracle.gemini import GeminiOracle
from chesscompanion.oracle.qt_bridge import OracleWorker
from chesscompanion.oracle.stockfish_online import StockfishOnlineOracle

if TYPE_CHECKING:
    from chesscompanion.config import CompanionSettings

ORACLE_NAMES = ("stockfish", "gemini")


def create_oracle(settings: CompanionSettings) -> IMoveOracle:
    """Build the oracle named by ``settings.oracle``."""
    if settings.oracle == "stockfish":
        return StockfishOnlineOracle(
            url=settings.stockfish_url,
            timeout_s=settings.request_timeout_s,
        )
    if settings.oracle == "gemini":
        if not settings.gemini_api_key:
            raise ValueError("Gemini oracle requires an API key (GEMINI_API_KEY)")
        return GeminiOracle(
            settings.gemini_api_key,
            model=settings.gemini_model,
            timeout_s=settings.request_timeout_s,
        )
    raise ValueError(f"Unknown oracle: {settings.oracle!r}")


__all__ = [
    "GeminiOracle",
    "IMoveOracle",
    "MAX_STRENGTH",
    "MIN_STRENGTH",
    "ORACLE_NAMES",
    "OracleError",
    "OracleWorker",
    "StockfishOnlineOracle",
    "clamp_strength",
    "create_oracle",
]
