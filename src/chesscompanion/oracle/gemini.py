"""Move oracle backed by a Google Gemini model."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from chesscompanion.core.enums import Color
from chesscompanion.oracle.base import OracleError

if TYPE_CHECKING:
    from chesscompanion.core.position import Position

_LOGGER = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT_S = 15.0

_MOVE_NUMBER = re.compile(r"^\d+\.+")
_QUOTES = "\"'`*"
_STRIP_CHARS = ".,;:!? \t\r\n"


def game_phase(ply: int) -> str:
    if ply < 10:
        return "Opening"
    if ply < 30:
        return "Middlegame"
    return "Endgame"


def build_prompt(position: Position) -> str:
    side = "White" if position.side_to_move == Color.WHITE else "Black"
    return (
        f"As a chess grandmaster, analyze this position (FEN: {position.fen}) "
        "and provide the single best move to win quickly.\n"
        f"Current turn: {side}\n"
        f"Game phase: {game_phase(position.ply)}\n"
        "Consider:\n"
        "1. Material advantage and piece activity\n"
        "2. King safety and pawn structure\n"
        "3. Tactical opportunities and threats\n"
        "4. Control of key squares and center\n"
        "5. Development and piece coordination\n"
        'Respond ONLY with the move in standard algebraic notation (e.g., "e4", "Nf3", "O-O").'
    )


def normalize_reply(text: str) -> str:
    """Pick the first move-like token of a model reply."""
    for raw in text.split():
        token = _MOVE_NUMBER.sub("", raw.strip(_QUOTES)).strip(_STRIP_CHARS + _QUOTES)
        if token:
            return token
    raise OracleError(f"Gemini reply has no move: {text!r}")


class GeminiOracle:
    """Prompts Gemini for one SAN move.

    The model has no notion of search depth, so ``strength`` is ignored.

    Args:
        api_key: Gemini API key.
        model: Model name.
        timeout_s: Per-request timeout for a client built from *api_key*.
        client: Optional pre-built ``genai.Client`` (tests inject a stub).
    """

    __slots__ = ("_client", "_model")

    def __init__(
        self,
        api_key: str = "",
        *,
        model: str = DEFAULT_MODEL,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        client: Any | None = None,
    ) -> None:
        if client is None:
            if not api_key:
                raise ValueError("Gemini oracle requires an API key")
            client = genai.Client(
                api_key=api_key,
                http_options=genai_types.HttpOptions(timeout=int(timeout_s * 1000)),
            )
        self._client = client
        self._model = model

    def suggest(self, position: Position, strength: int) -> str:
        del strength
        prompt = build_prompt(position)
        _LOGGER.debug("Gemini request model=%s fen=%s", self._model, position.fen)
        try:
            response = self._client.models.generate_content(
                model=self._model,
                contents=prompt,
            )
        except genai_errors.APIError as exc:
            raise OracleError(f"Gemini request failed: {exc}") from exc

        text = getattr(response, "text", None)
        if not text:
            raise OracleError("Gemini returned no text")
        return normalize_reply(text)
