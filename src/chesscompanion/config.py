"""User-configurable settings and their QSettings persistence."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace

from PyQt6.QtCore import QSettings

from chesscompanion.oracle.base import clamp_strength
from chesscompanion.oracle.gemini import DEFAULT_MODEL
from chesscompanion.oracle.stockfish_online import DEFAULT_TIMEOUT_S, DEFAULT_URL

_LOGGER = logging.getLogger(__name__)

ORGANIZATION = "ChessCompanion"
APPLICATION = "ChessCompanion"
API_KEY_ENV = "GEMINI_API_KEY"


@dataclass
class CompanionSettings:
    """All user-configurable settings."""

    # Oracle
    oracle: str = "stockfish"
    strength: int = 15  # search depth, 1–15
    stockfish_url: str = DEFAULT_URL
    request_timeout_s: float = DEFAULT_TIMEOUT_S
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_MODEL

    # General
    language: str = "English"
    notice_timeout_ms: int = 3000

    def clamped(self) -> CompanionSettings:
        """Copy with out-of-range values pulled back into range."""
        return replace(
            self,
            oracle=self.oracle.strip().lower(),
            strength=clamp_strength(self.strength),
            request_timeout_s=max(self.request_timeout_s, 1.0),
            notice_timeout_ms=max(self.notice_timeout_ms, 0),
        )


def default_store() -> QSettings:
    return QSettings(ORGANIZATION, APPLICATION)


def load_settings(store: QSettings | None = None) -> CompanionSettings:
    """Read settings from *store*; missing keys keep their defaults.

    An empty Gemini key is filled from the ``GEMINI_API_KEY`` environment
    variable.
    """
    s = store if store is not None else default_store()
    d = CompanionSettings()
    settings = CompanionSettings(
        oracle=str(s.value("oracle/name", d.oracle, type=str)),
        strength=int(s.value("oracle/strength", d.strength, type=int)),
        stockfish_url=str(s.value("oracle/stockfish_url", d.stockfish_url, type=str)),
        request_timeout_s=float(
            s.value("oracle/timeout_s", d.request_timeout_s, type=float)
        ),
        gemini_api_key=str(s.value("oracle/gemini_api_key", d.gemini_api_key, type=str)),
        gemini_model=str(s.value("oracle/gemini_model", d.gemini_model, type=str)),
        language=str(s.value("general/language", d.language, type=str)),
        notice_timeout_ms=int(
            s.value("general/notice_timeout_ms", d.notice_timeout_ms, type=int)
        ),
    )
    if not settings.gemini_api_key:
        settings.gemini_api_key = os.environ.get(API_KEY_ENV, "")
    return settings.clamped()


def save_settings(settings: CompanionSettings, store: QSettings | None = None) -> None:
    s = store if store is not None else default_store()
    s.setValue("oracle/name", settings.oracle)
    s.setValue("oracle/strength", settings.strength)
    s.setValue("oracle/stockfish_url", settings.stockfish_url)
    s.setValue("oracle/timeout_s", settings.request_timeout_s)
    s.setValue("oracle/gemini_api_key", settings.gemini_api_key)
    s.setValue("oracle/gemini_model", settings.gemini_model)
    s.setValue("general/language", settings.language)
    s.setValue("general/notice_timeout_ms", settings.notice_timeout_ms)
    s.sync()
    _LOGGER.debug("Settings saved to %s", s.fileName())
