"""Tests for syntax/cursor.py."""

import pytest

from cslengine.syntax.cursor import Cursor


class TestCursor:
    def test_current_and_advance(self) -> None:
        cursor = Cursor("ab", 0)
        assert cursor.current == "a"
        assert cursor.advance().current == "b"
        assert cursor.pos == 0

    def test_current_at_eof_raises(self) -> None:
        with pytest.raises(EOFError):
            _ = Cursor("a", 1).current

    def test_advance_stops_at_eof(self) -> None:
        assert Cursor("ab", 1).advance(5).pos == 2

    def test_peek(self) -> None:
        cursor = Cursor("pp.", 0)
        assert cursor.peek() == "p"
        assert cursor.peek(2) == "."
        assert cursor.peek(3) is None

    def test_advance_while(self) -> None:
        cursor = Cursor("365-375", 0).advance_while(str.isdigit)
        assert cursor.pos == 3
        assert Cursor("365-375", 0).slice_to(cursor.pos) == "365"

    def test_advance_while_to_eof(self) -> None:
        assert Cursor("123", 0).advance_while(str.isdigit).is_eof

    def test_skip_unicode_whitespace(self) -> None:
        assert Cursor("   \t12", 0).skip_whitespace().current == "1"
