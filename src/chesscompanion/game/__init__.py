"""Game management layer — session state, turn coordination, input gating.

Quick start::

    from chesscompanion.core import Color, parse_square
    from chesscompanion.game import GameController

    ctrl = GameController()
    ctrl.events.on_oracle_request.append(send_to_oracle)
    ctrl.start_new_game(oracle_side=Color.BLACK)
    ctrl.piece_drop(parse_square("e2"), parse_square("e4"))
"""

from chesscompanion.game.controller import GameController, GameEvents
from chesscompanion.game.coordinator import DEFAULT_STRENGTH, TurnCoordinator
from chesscompanion.game.errors import (
    AnalysisInProgress,
    ErrorKind,
    GameOver,
    IllegalMove,
    NoActiveGame,
    NoPieceAtSource,
    OracleFailure,
    SessionError,
    StaleOracleResponse,
    UndoUnavailable,
    WrongPieceColor,
    WrongTurn,
)
from chesscompanion.game.interfaces import (
    CoordinatorState,
    GamePhase,
    OracleRequest,
    SelectionPhase,
)
from chesscompanion.game.navigator import HistoryNavigator
from chesscompanion.game.session import MoveRecord, SessionState
from chesscompanion.game.validator import (
    DEFAULT_PROMOTION,
    ManualMoveValidator,
    SquareSelection,
)

__all__ = [
    # States / tokens
    "CoordinatorState",
    "GamePhase",
    "OracleRequest",
    "SelectionPhase",
    # Errors
    "AnalysisInProgress",
    "ErrorKind",
    "GameOver",
    "IllegalMove",
    "NoActiveGame",
    "NoPieceAtSource",
    "OracleFailure",
    "SessionError",
    "StaleOracleResponse",
    "UndoUnavailable",
    "WrongPieceColor",
    "WrongTurn",
    # Concrete
    "DEFAULT_PROMOTION",
    "DEFAULT_STRENGTH",
    "GameController",
    "GameEvents",
    "HistoryNavigator",
    "ManualMoveValidator",
    "MoveRecord",
    "SessionState",
    "SquareSelection",
    "TurnCoordinator",
]
