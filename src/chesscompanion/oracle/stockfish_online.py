"""Move oracle backed by the public Stockfish HTTP API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from chesscompanion.oracle.base import OracleError, clamp_strength

if TYPE_CHECKING:
    from chesscompanion.core.position import Position

_LOGGER = logging.getLogger(__name__)

DEFAULT_URL = "https://stockfish.online/api/s/v2.php"
DEFAULT_TIMEOUT_S = 15.0


def parse_bestmove(raw: str) -> str:
    """Extract the move from ``"bestmove e2e4 ponder e7e5"`` style text."""
    tokens = raw.split()
    if tokens and tokens[0] == "bestmove":
        tokens = tokens[1:]
    if not tokens or tokens[0] in ("(none)", "0000"):
        raise OracleError(f"No move in response: {raw!r}")
    return tokens[0]


class StockfishOnlineOracle:
    """Asks ``stockfish.online`` for the best move at a given search depth.

    Args:
        url: API endpoint.
        timeout_s: Per-request timeout; expiry is reported as an oracle error.
        session: Optional pre-configured :class:`requests.Session`.
    """

    __slots__ = ("_url", "_timeout_s", "_session")

    def __init__(
        self,
        *,
        url: str = DEFAULT_URL,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        session: requests.Session | None = None,
    ) -> None:
        self._url = url
        self._timeout_s = timeout_s
        self._session = session if session is not None else requests.Session()

    def suggest(self, position: Position, strength: int) -> str:
        params = {"fen": position.fen, "depth": clamp_strength(strength)}
        _LOGGER.debug("Stockfish request depth=%d fen=%s", params["depth"], params["fen"])
        try:
            resp = self._session.post(self._url, params=params, timeout=self._timeout_s)
        except requests.Timeout as exc:
            raise OracleError(f"Stockfish request timed out after {self._timeout_s}s") from exc
        except requests.RequestException as exc:
            raise OracleError(f"Stockfish request failed: {exc}") from exc

        if resp.status_code != 200:
            raise OracleError(f"Stockfish HTTP {resp.status_code}")

        try:
            payload: Any = resp.json()
        except ValueError as exc:
            raise OracleError("Stockfish returned malformed JSON") from exc

        if not isinstance(payload, dict):
            raise OracleError("Stockfish returned an unexpected payload")
        bestmove = payload.get("bestmove")
        if not payload.get("success") or not isinstance(bestmove, str) or not bestmove:
            raise OracleError(str(payload.get("data") or "Stockfish did not return a move"))

        return parse_bestmove(bestmove)
