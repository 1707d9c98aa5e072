"""TurnCoordinator — drives oracle requests for the oracle-controlled side."""

from __future__ import annotations

import logging
from collections.abc import Callable

from chesscompanion.game.errors import OracleFailure, SessionError, StaleOracleResponse
from chesscompanion.game.interfaces import CoordinatorState, OracleRequest
from chesscompanion.game.session import MoveRecord, SessionState

_LOGGER = logging.getLogger(__name__)

DispatchCallback = Callable[[OracleRequest], None]

DEFAULT_STRENGTH = 15


class TurnCoordinator:
    """Two-state machine: ``IDLE`` and ``AWAITING_ORACLE``.

    The host calls :meth:`evaluate` after every session mutation, including
    the one made by :meth:`resolve`.  When the oracle side is to move it issues exactly one :class:`OracleRequest` through
    *dispatch*; the host delivers the outcome later via :meth:`resolve` or
    :meth:`fail`.  Outcomes whose token no longer matches the live position
    are dropped.

    There is no automatic retry: after a failure the oracle side stays to
    move until something calls :meth:`evaluate` again.
    """

    __slots__ = ("_session", "_dispatch", "_pending", "_next_request_id", "strength")

    def __init__(
        self,
        session: SessionState,
        dispatch: DispatchCallback,
        *,
        strength: int = DEFAULT_STRENGTH,
    ) -> None:
        self._session = session
        self._dispatch = dispatch
        self._pending: OracleRequest | None = None
        self._next_request_id = 0
        self.strength = strength

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> CoordinatorState:
        if self._pending is None:
            return CoordinatorState.IDLE
        return CoordinatorState.AWAITING_ORACLE

    @property
    def is_awaiting(self) -> bool:
        return self._pending is not None

    @property
    def pending(self) -> OracleRequest | None:
        return self._pending

    # ── Transitions ──────────────────────────────────────────────────────

    def should_request(self) -> bool:
        session = self._session
        return (
            self._pending is None
            and session.oracle_side is not None
            and not session.is_game_over
            and session.side_to_move == session.oracle_side
        )

    def evaluate(self) -> bool:
        """Enter ``AWAITING_ORACLE`` if the oracle side is to move.

        Returns True when a request was issued.  If *dispatch* raises, the
        coordinator stays ``IDLE`` and the exception propagates.
        """
        if not self.should_request():
            return False

        self._next_request_id += 1
        request = OracleRequest(
            request_id=self._next_request_id,
            position=self._session.live_position,
            strength=self.strength,
        )
        self._pending = request
        _LOGGER.debug(
            "Oracle request %d for %s", request.request_id, request.position.fen
        )
        try:
            self._dispatch(request)
        except Exception:
            self._pending = None
            raise
        return True

    def resolve(self, request_id: int, text: str) -> MoveRecord | None:
        """Apply the oracle's suggestion for *request_id*.

        Returns the applied record, or ``None`` for a stale response.

        Raises:
            OracleFailure: *text* is not a legal move in the request position.
        """
        try:
            request = self._claim(request_id)
        except StaleOracleResponse as exc:
            _LOGGER.debug("Discarding oracle response: %s", exc)
            return None

        move = self._session.rules.parse_move(request.position, text)
        if move is None:
            _LOGGER.warning("Oracle suggested an unusable move: %r", text)
            raise OracleFailure(f"illegal suggestion {text!r}")

        try:
            record = self._session.apply_move(move)
        except SessionError as exc:
            raise OracleFailure(str(exc)) from exc

        _LOGGER.info("Oracle played %s", record.san)
        return record

    def fail(self, request_id: int, message: str) -> None:
        """Report an oracle error for *request_id*.

        Raises:
            OracleFailure: always, unless the response is stale.
        """
        try:
            self._claim(request_id)
        except StaleOracleResponse as exc:
            _LOGGER.debug("Discarding oracle error: %s", exc)
            return
        _LOGGER.warning("Oracle request %d failed: %s", request_id, message)
        raise OracleFailure(message)

    def invalidate(self) -> None:
        """Forget the outstanding request; its late result becomes stale."""
        if self._pending is not None:
            _LOGGER.debug("Invalidating oracle request %d", self._pending.request_id)
        self._pending = None

    # ── Internal ─────────────────────────────────────────────────────────

    def _claim(self, request_id: int) -> OracleRequest:
        """Return to ``IDLE`` and hand back the matching request."""
        request = self._pending
        if request is None or request.request_id != request_id:
            raise StaleOracleResponse(f"request {request_id} is not outstanding")
        self._pending = None
        if request.position is not self._session.live_position:
            raise StaleOracleResponse(f"request {request_id} position changed")
        return request
