"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys

from chesscompanion.config import CompanionSettings

_LOGGER = logging.getLogger(__name__)


def run_application(settings: CompanionSettings, argv: list[str] | None = None) -> int:
    """Create the Qt core application and run the console front-end."""
    from PyQt6.QtCore import QCoreApplication

    from chesscompanion.game.controller import GameController
    from chesscompanion.oracle import create_oracle
    from chesscompanion.ui.console import ConsoleFrontEnd
    from chesscompanion.ui.i18n import set_language, t
    from chesscompanion.ui.oracle_session import OracleSession

    app = QCoreApplication.instance() or QCoreApplication(sys.argv if argv is None else argv)
    app.setApplicationName("Chess Companion")
    set_language(settings.language)

    try:
        oracle = create_oracle(settings)
    except ValueError as exc:
        print(t().console_oracle_unavailable.format(msg=exc), file=sys.stderr)
        return 2
    _LOGGER.info("Using %s oracle at strength %d", settings.oracle, settings.strength)

    controller = GameController(strength=settings.strength)
    session = OracleSession(
        controller=controller,
        oracle=oracle,
        notice_timeout_ms=settings.notice_timeout_ms,
    )
    session.setup()
    try:
        return ConsoleFrontEnd(controller).run()
    finally:
        session.shutdown()
