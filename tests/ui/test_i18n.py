"""Tests for locale tables."""

import re
from dataclasses import fields

import pytest

from chesscompanion.ui import i18n
from chesscompanion.ui.i18n import LANGUAGES, set_language, t

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class TestI18n:
    def test_default_is_english(self) -> None:
        assert t().status_check == "Check!"

    def test_switch_language(self) -> None:
        set_language("Russian")
        assert t().status_check == "Шах!"

    def test_unknown_language_falls_back(self) -> None:
        set_language("Klingon")
        assert t().status_check == "Check!"

    @pytest.mark.parametrize("language", LANGUAGES)
    def test_locales_complete(self, language: str) -> None:
        english = i18n._LOCALES["English"]
        strings = i18n._LOCALES[language]
        for field in fields(strings):
            text = getattr(strings, field.name)
            assert text, field.name
            reference = getattr(english, field.name)
            assert set(_PLACEHOLDER.findall(text)) == set(_PLACEHOLDER.findall(reference))
