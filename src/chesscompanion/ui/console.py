"""Text front-end: reads commands, drives the controller, prints the surface."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

import chess
from PyQt6.QtCore import QEventLoop, QObject, QThread, pyqtSignal, pyqtSlot

from chesscompanion.core.enums import Color, Direction
from chesscompanion.core.types import Square, parse_square
from chesscompanion.game.controller import GameController
from chesscompanion.game.interfaces import GamePhase
from chesscompanion.oracle.base import clamp_strength
from chesscompanion.ui.i18n import t
from chesscompanion.ui.surface import BoardSurface, color_name

_LOGGER = logging.getLogger(__name__)

_FILES = "abcdefgh"
_QUIT = frozenset({"quit", "exit", "q"})


def render_board(surface: BoardSurface) -> str:
    """ASCII board from the surface's orientation.

    The selected square is marked ``(x)``, legal destinations ``*`` and the
    squares of the last move ``'``.
    """
    board = surface.position.board()
    last = surface.last_move
    touched = set() if last is None else {last.origin, last.destination}

    ranks = range(7, -1, -1) if surface.orientation == Color.WHITE else range(8)
    files = range(8) if surface.orientation == Color.WHITE else range(7, -1, -1)

    lines = []
    for rank in ranks:
        cells = []
        for file in files:
            sq = chess.square(file, rank)
            piece = board.piece_at(sq)
            symbol = piece.symbol() if piece is not None else "."
            if sq == surface.selected:
                cells.append(f"({symbol})")
            elif sq in surface.destinations:
                cells.append(f" {symbol}*")
            elif sq in touched:
                cells.append(f" {symbol}'")
            else:
                cells.append(f" {symbol} ")
        lines.append(f"{rank + 1} " + "".join(cells))
    lines.append("   " + "  ".join(_FILES[f] for f in files))
    return "\n".join(lines)


def render_surface(surface: BoardSurface) -> str:
    s = t()
    parts = [render_board(surface), "", surface.status_line]
    if surface.oracle_side is not None:
        parts.append(s.banner_oracle_side.format(color=color_name(surface.oracle_side)))
    if surface.analyzing:
        parts.append(s.banner_analyzing)
    if surface.copy_move:
        parts.append(s.banner_copy_move.format(san=surface.copy_move))
    if surface.notice:
        parts.append(f"! {surface.notice}")
    if surface.moves:
        parts.append("")
        parts.append(s.moves_header)
        for row in surface.moves:
            parts.append(f"{row.number:>3}. {row.white:<8} {row.black}")
    parts.append(surface.counter)
    return "\n".join(parts)


class _LineReader(QObject):
    """Reads one line per request from a blocking text stream.

    Lives on its own thread so the owning thread's event loop keeps
    delivering oracle results while input is pending.
    """

    line_read = pyqtSignal(str)
    closed = pyqtSignal()

    __slots__ = ("_stream",)

    def __init__(self, stream: TextIO) -> None:
        super().__init__()
        self._stream = stream

    @pyqtSlot()
    def read_line(self) -> None:
        line = self._stream.readline()
        if line:
            self.line_read.emit(line)
        else:
            self.closed.emit()


class _ConsoleCommandBus(QObject):
    """Signal bridge between the reader thread and the owning thread."""

    read_requested = pyqtSignal()
    line_received = pyqtSignal(str)
    input_closed = pyqtSignal()


class ConsoleFrontEnd:
    """Line-oriented command loop.

    Commands run on the owning thread and never wait for the oracle.  Input
    is read by a helper thread one line at a time, so navigation, new game,
    change side and flip stay available while a request is outstanding.
    When an oracle result or failure lands, the surface is printed again.
    """

    __slots__ = (
        "__weakref__",
        "_controller",
        "_in",
        "_out",
        "_commands",
        "_phase",
        "_handling",
        "_oracle_settled",
        "_loop",
        "_bus",
    )

    def __init__(
        self,
        controller: GameController,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._controller = controller
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "new": self._cmd_new,
            "side": self._cmd_side,
            "flip": self._cmd_flip,
            "undo": self._cmd_undo,
            "back": self._cmd_back,
            "forward": self._cmd_forward,
            "click": self._cmd_click,
            "drop": self._cmd_drop,
            "retry": self._cmd_retry,
            "strength": self._cmd_strength,
            "show": self._cmd_show,
            "help": self._cmd_help,
        }
        self._phase = controller.phase
        self._handling = False
        self._oracle_settled = False
        self._loop: QEventLoop | None = None
        self._bus: _ConsoleCommandBus | None = None

        events = controller.events
        events.on_phase_changed.append(self._on_phase_changed)
        events.on_surface_changed.append(self._on_surface_changed)

    def run(self) -> int:
        """Read commands until ``quit`` or end of input."""
        self._print(t().console_welcome)
        self._print(self._render())

        thread = QThread()
        reader = _LineReader(self._in)
        reader.moveToThread(thread)
        bus = _ConsoleCommandBus()
        bus.read_requested.connect(reader.read_line)
        reader.line_read.connect(bus.line_received)
        reader.closed.connect(bus.input_closed)
        bus.line_received.connect(self._on_line_received)
        bus.input_closed.connect(self._stop)

        self._bus = bus
        self._loop = QEventLoop()
        thread.start()
        try:
            self._request_line()
            self._loop.exec()
        finally:
            self._loop = None
            self._bus = None
            thread.quit()
            thread.wait()
        _LOGGER.debug("Console loop finished")
        return 0

    def handle(self, line: str) -> bool:
        """Execute one command line. Returns False when the loop should stop."""
        words = line.split()
        if not words:
            return True
        name, args = words[0].lower(), words[1:]
        if name in _QUIT:
            return False

        command = self._commands.get(name)
        if command is None:
            self._print(t().console_unknown_command.format(cmd=name))
            return True

        self._handling = True
        try:
            command(args)
        finally:
            self._handling = False
        if name not in ("help", "show", "strength"):
            self._print(self._render())
        return True

    # ── Commands ─────────────────────────────────────────────────────────

    def _cmd_new(self, args: list[str]) -> None:
        side = {"white": Color.WHITE, "black": Color.BLACK}.get(args[0].lower()) if args else None
        if side is None:
            self._print(t().console_help)
            return
        self._controller.start_new_game(side)

    def _cmd_side(self, _args: list[str]) -> None:
        self._controller.change_side()

    def _cmd_flip(self, _args: list[str]) -> None:
        self._controller.flip_orientation()

    def _cmd_undo(self, _args: list[str]) -> None:
        self._controller.undo_last_manual_move()

    def _cmd_back(self, _args: list[str]) -> None:
        self._controller.navigate(Direction.BACK)

    def _cmd_forward(self, _args: list[str]) -> None:
        self._controller.navigate(Direction.FORWARD)

    def _cmd_click(self, args: list[str]) -> None:
        squares = self._squares(args, 1)
        if squares is not None:
            self._controller.square_click(squares[0])

    def _cmd_drop(self, args: list[str]) -> None:
        squares = self._squares(args, 2)
        if squares is not None:
            self._controller.piece_drop(squares[0], squares[1])

    def _cmd_retry(self, _args: list[str]) -> None:
        self._controller.retry_oracle()

    def _cmd_strength(self, args: list[str]) -> None:
        if len(args) != 1 or not args[0].isdigit():
            self._print(t().console_help)
            return
        value = clamp_strength(int(args[0]))
        self._controller.set_strength(value)
        self._print(t().console_strength.format(value=value))

    def _cmd_show(self, _args: list[str]) -> None:
        self._print(self._render())

    def _cmd_help(self, _args: list[str]) -> None:
        self._print(t().console_help)

    # ── Event handlers ───────────────────────────────────────────────────

    def _on_line_received(self, line: str) -> None:
        if self.handle(line):
            self._request_line()
        else:
            self._stop()

    def _on_phase_changed(self, phase: GamePhase) -> None:
        previous, self._phase = self._phase, phase
        if previous == GamePhase.THINKING and phase != GamePhase.THINKING:
            # Commands print their own result.
            self._oracle_settled = not self._handling

    def _on_surface_changed(self) -> None:
        if not self._oracle_settled:
            return
        self._oracle_settled = False
        self._print(self._render())
        if self._loop is not None:
            self._prompt()

    # ── Helpers ──────────────────────────────────────────────────────────

    def _request_line(self) -> None:
        if self._bus is None:
            return
        self._prompt()
        self._bus.read_requested.emit()

    def _stop(self) -> None:
        if self._loop is not None:
            self._loop.quit()

    def _squares(self, args: list[str], count: int) -> list[Square] | None:
        if len(args) != count:
            self._print(t().console_help)
            return None
        squares = []
        for name in args:
            try:
                squares.append(parse_square(name))
            except ValueError:
                self._print(t().console_bad_square.format(name=name))
                return None
        return squares

    def _render(self) -> str:
        return render_surface(self._controller.surface())

    def _prompt(self) -> None:
        self._out.write("> ")
        self._out.flush()

    def _print(self, text: str) -> None:
        print(text, file=self._out)
