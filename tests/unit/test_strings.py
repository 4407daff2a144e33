"""
Тесты для Text Primitives

Покрывает concat / repeat, length / reverse и inert transformers
(uppercase / lowercase / trim возвращают receiver без изменений).
"""

import pytest

from mstd.core.text.strings import (
    concat,
    lowercase,
    repeat,
    text_length,
    text_reverse,
    trim,
    uppercase,
)


class TestConcatRepeat:
    """Тесты для concat и repeat"""

    def test_concat(self) -> None:
        assert concat("foo", "bar") == "foobar"
        assert concat("", "bar") == "bar"
        assert concat("foo", "") == "foo"

    def test_repeat(self) -> None:
        assert repeat("ab", 3) == "ababab"
        assert repeat("x", 1) == "x"

    def test_repeat_non_positive_is_empty(self) -> None:
        assert repeat("ab", 0) == ""
        assert repeat("ab", -4) == ""

    def test_repeat_rejects_fractional_times(self) -> None:
        with pytest.raises(TypeError, match="repeat: times"):
            repeat("ab", 1.5)


class TestLengthReverse:
    """Тесты для text_length и text_reverse"""

    def test_length(self) -> None:
        assert text_length("") == 0
        assert text_length("hello") == 5
        assert text_length("héllo wörld") == 11

    def test_reverse(self) -> None:
        assert text_reverse("abc") == "cba"
        assert text_reverse("") == ""
        assert text_reverse("a") == "a"

    def test_reverse_round_trip(self) -> None:
        for text in ("", "a", "racecar", "hello world"):
            assert text_reverse(text_reverse(text)) == text


class TestInertTransformers:
    """uppercase / lowercase / trim: задокументированные pass-through"""

    @pytest.mark.parametrize("transform", [uppercase, lowercase, trim])
    def test_returns_receiver_unchanged(self, transform) -> None:
        for text in ("Hello", "  padded  ", "MiXeD", ""):
            assert transform(text) == text

    def test_no_case_conversion(self) -> None:
        assert uppercase("abc") == "abc"
        assert lowercase("ABC") == "ABC"

    def test_no_whitespace_trimming(self) -> None:
        assert trim("  x  ") == "  x  "
