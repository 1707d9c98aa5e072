"""Shared oracle models and protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chesscompanion.core.position import Position

MIN_STRENGTH = 1
MAX_STRENGTH = 15


class OracleError(RuntimeError):
    """The oracle could not produce a suggestion (network, format, auth)."""


class IMoveOracle(Protocol):
    """Protocol for move-suggestion services.

    ``suggest`` blocks until the service answers and returns move text
    (SAN or UCI).  The text is not trusted: callers re-validate it.
    """

    def suggest(self, position: Position, strength: int) -> str: ...


def clamp_strength(strength: int) -> int:
    return min(max(strength, MIN_STRENGTH), MAX_STRENGTH)
