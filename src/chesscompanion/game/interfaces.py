"""State-machine enums and the oracle request token for the game layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesscompanion.core.position import Position


# ── FSM states ───────────────────────────────────────────────────────────────


class CoordinatorState(IntEnum):
    """Turn coordinator states."""

    IDLE = auto()
    AWAITING_ORACLE = auto()


class SelectionPhase(IntEnum):
    """Click-to-move selection states."""

    UNSELECTED = auto()
    SELECTED = auto()


class GamePhase(IntEnum):
    """Coarse session phase reported to listeners."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # oracle request outstanding
    GAME_OVER = auto()


# ── Oracle request token ─────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class OracleRequest:
    """One outstanding oracle call, stamped with the position it was issued for.

    ``position`` is the live position object at dispatch time; a response
    is only applicable while that exact object is still the live position.
    """

    request_id: int
    position: Position
    strength: int
