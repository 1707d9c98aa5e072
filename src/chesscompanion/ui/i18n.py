"""Internationalisation strings for the companion front-ends.

Usage::

    from chesscompanion.ui.i18n import t, set_language

    set_language("Russian")
    print(t().status_check)        # "Шах!"
    print(t().wins_checkmate.format(color=t().color_white))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Status line ──────────────────────────────────────────────────────
    status_white_to_move: str
    status_black_to_move: str
    status_check: str
    status_no_game: str

    # Game-over texts
    wins_checkmate: str  # "Checkmate! {color} wins!"
    draw_stalemate: str
    draw_repetition: str
    draw_insufficient: str
    draw_generic: str
    color_white: str
    color_black: str

    # ── Banners ──────────────────────────────────────────────────────────
    banner_analyzing: str
    banner_copy_move: str  # "Copy this move: {san}"
    banner_oracle_side: str  # "Suggesting moves for {color}"

    # ── Navigation / move table ──────────────────────────────────────────
    nav_counter: str  # "Move {index} of {total}"
    moves_header: str
    moves_col_number: str

    # ── Notices (one per rejected operation) ─────────────────────────────
    notice_no_active_game: str
    notice_analysis_in_progress: str
    notice_game_over: str
    notice_wrong_turn: str
    notice_no_piece_at_source: str
    notice_wrong_piece_color: str  # "It's {color}'s turn"
    notice_illegal_move: str
    notice_oracle_failure: str
    notice_undo_unavailable: str

    # ── Console ──────────────────────────────────────────────────────────
    console_welcome: str
    console_help: str
    console_unknown_command: str  # "Unknown command: {cmd}"
    console_bad_square: str  # "Invalid square: {name}"
    console_oracle_unavailable: str  # "Oracle unavailable: {msg}"
    console_strength: str  # "Oracle strength: {value}"


_EN = Strings(
    status_white_to_move="White to move",
    status_black_to_move="Black to move",
    status_check="Check!",
    status_no_game="Select the color the AI should play",
    wins_checkmate="Checkmate! {color} wins!",
    draw_stalemate="Stalemate! Game is drawn!",
    draw_repetition="Draw by repetition!",
    draw_insufficient="Draw by insufficient material!",
    draw_generic="It's a draw!",
    color_white="White",
    color_black="Black",
    banner_analyzing="Calculating best move...",
    banner_copy_move="Copy this move: {san}",
    banner_oracle_side="Suggesting moves for {color}",
    nav_counter="Move {index} of {total}",
    moves_header="Move History",
    moves_col_number="#",
    notice_no_active_game="Please select a color first",
    notice_analysis_in_progress="Please wait, calculating move...",
    notice_game_over="Game is over",
    notice_wrong_turn="Not your turn",
    notice_no_piece_at_source="No piece at selected position",
    notice_wrong_piece_color="It's {color}'s turn",
    notice_illegal_move="Illegal move for this piece",
    notice_oracle_failure="Failed to get AI move suggestion",
    notice_undo_unavailable="Nothing to undo",
    console_welcome="Chess Companion. Type 'help' for commands.",
    console_help=(
        "Commands:\n"
        "  new white|black   start a game; the AI plays the given color\n"
        "  side              change side (ends the game)\n"
        "  click <sq>        click a square, e.g. click e2\n"
        "  drop <from> <to>  drag a piece, e.g. drop e7 e5\n"
        "  back / forward    browse earlier positions\n"
        "  undo              take back your last move\n"
        "  retry             ask the AI again after a failure\n"
        "  strength <1-15>   oracle strength for the next requests\n"
        "  flip              flip the board\n"
        "  show              print the board\n"
        "  quit              exit"
    ),
    console_unknown_command="Unknown command: {cmd}",
    console_bad_square="Invalid square: {name}",
    console_oracle_unavailable="Oracle unavailable: {msg}",
    console_strength="Oracle strength: {value}",
)

_RU = Strings(
    status_white_to_move="Ход белых",
    status_black_to_move="Ход чёрных",
    status_check="Шах!",
    status_no_game="Выберите цвет, за который играет ИИ",
    wins_checkmate="Мат! {color} побеждают!",
    draw_stalemate="Пат! Ничья!",
    draw_repetition="Ничья повторением позиции!",
    draw_insufficient="Ничья: недостаточно материала!",
    draw_generic="Ничья!",
    color_white="Белые",
    color_black="Чёрные",
    banner_analyzing="Расчёт лучшего хода...",
    banner_copy_move="Сделайте этот ход: {san}",
    banner_oracle_side="Подсказки для: {color}",
    nav_counter="Позиция {index} из {total}",
    moves_header="История ходов",
    moves_col_number="№",
    notice_no_active_game="Сначала выберите цвет",
    notice_analysis_in_progress="Подождите, идёт расчёт хода...",
    notice_game_over="Игра окончена",
    notice_wrong_turn="Сейчас не ваш ход",
    notice_no_piece_at_source="На выбранном поле нет фигуры",
    notice_wrong_piece_color="Сейчас ходят {color}",
    notice_illegal_move="Эта фигура так не ходит",
    notice_oracle_failure="Не удалось получить ход от ИИ",
    notice_undo_unavailable="Нечего отменять",
    console_welcome="Chess Companion. Введите 'help' для списка команд.",
    console_help=(
        "Команды:\n"
        "  new white|black   новая игра; ИИ играет указанным цветом\n"
        "  side              сменить сторону (завершает игру)\n"
        "  click <поле>      клик по полю, например click e2\n"
        "  drop <с> <на>     перетащить фигуру, например drop e7 e5\n"
        "  back / forward    просмотр предыдущих позиций\n"
        "  undo              отменить свой последний ход\n"
        "  retry             повторить запрос к ИИ после ошибки\n"
        "  strength <1-15>   сила ИИ для следующих запросов\n"
        "  flip              перевернуть доску\n"
        "  show              показать доску\n"
        "  quit              выход"
    ),
    console_unknown_command="Неизвестная команда: {cmd}",
    console_bad_square="Неверное поле: {name}",
    console_oracle_unavailable="ИИ недоступен: {msg}",
    console_strength="Сила ИИ: {value}",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
