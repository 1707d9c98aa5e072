"""HistoryNavigator — read-only traversal of past positions."""

from __future__ import annotations

import logging

from chesscompanion.core.enums import Direction
from chesscompanion.core.position import Position
from chesscompanion.game.session import SessionState

_LOGGER = logging.getLogger(__name__)

COUNTER_TEMPLATE = "Move {index} of {total}"


class HistoryNavigator:
    """Moves the display cursor; never touches history or the live game."""

    __slots__ = ("_session",)

    def __init__(self, session: SessionState) -> None:
        self._session = session

    def navigate(self, direction: Direction) -> bool:
        """Step the cursor once. Returns False at the bounds (no-op)."""
        session = self._session
        last = len(session.history) - 1
        target = min(max(session.cursor + int(direction), 0), last)
        if target == session.cursor:
            return False
        session.cursor = target
        _LOGGER.debug("Cursor moved to %d of %d", target, last)
        return True

    @property
    def position(self) -> Position:
        return self._session.displayed_position

    @property
    def can_go_back(self) -> bool:
        return self._session.cursor > 0

    @property
    def can_go_forward(self) -> bool:
        return self._session.cursor < len(self._session.history) - 1

    @property
    def is_at_live(self) -> bool:
        return not self.can_go_forward

    def counter_text(self, template: str = COUNTER_TEMPLATE) -> str:
        """Displayed entry as *template* filled with 1-based ``index`` and ``total``."""
        session = self._session
        return template.format(index=session.cursor + 1, total=len(session.history))
