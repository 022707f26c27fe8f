# tests/test_width.py
"""
Tests for display-width lookups and lazy UTF-8 rune iteration.
"""

import pytest

from lintreport.width import (
    REPLACEMENT_CHAR,
    bytes_width,
    decode_runes,
    iter_runes,
    rune_width,
    string_width,
)


class TestRuneWidth:

    @pytest.mark.parametrize("ch,expected", [
        ("a", 1),
        ("~", 1),
        ("é", 1),
        ("日", 2),
        ("本", 2),
        ("한", 2),
        ("\u0301", 0),
        ("\t", 0),
        ("\x00", 0),
        ("\x1b", 0),
        (REPLACEMENT_CHAR, 1),
    ])
    def test_widths(self, ch, expected):
        assert rune_width(ch) == expected

    def test_never_negative(self):
        for code in range(0x20):
            assert rune_width(chr(code)) >= 0


class TestStringWidth:

    def test_ascii(self):
        assert string_width("let ") == 4

    def test_mixed(self):
        assert string_width("let 日本") == 8

    def test_combining_sequence(self):
        assert string_width("é") == 1

    def test_custom_width(self):
        assert string_width("abc", width=lambda ch: 3) == 9


class TestIterRunes:

    def test_sizes(self):
        data = "a日é".encode("utf-8")
        assert list(iter_runes(data)) == [("a", 1), ("日", 3), ("é", 2)]

    def test_from_offset(self):
        data = "ab日c".encode("utf-8")
        assert [r for r, _ in iter_runes(data, 2)] == ["日", "c"]

    def test_offset_past_end(self):
        assert list(iter_runes(b"abc", 10)) == []

    def test_invalid_lead_byte(self):
        assert list(iter_runes(b"\xffa")) == [(REPLACEMENT_CHAR, 1), ("a", 1)]

    def test_truncated_sequence(self):
        assert list(iter_runes(b"\xe6\x97")) == [
            (REPLACEMENT_CHAR, 1),
            (REPLACEMENT_CHAR, 1),
        ]

    def test_starting_inside_a_rune(self):
        data = "日x".encode("utf-8")
        assert list(iter_runes(data, 1)) == [
            (REPLACEMENT_CHAR, 1),
            (REPLACEMENT_CHAR, 1),
            ("x", 1),
        ]

    def test_bad_continuation(self):
        assert list(iter_runes(b"\xe6ab")) == [
            (REPLACEMENT_CHAR, 1),
            ("a", 1),
            ("b", 1),
        ]

    def test_accepts_memoryview(self):
        view = memoryview("日本".encode("utf-8"))
        assert [r for r, _ in iter_runes(view[3:])] == ["本"]

    def test_every_byte_accounted_for(self):
        data = b"ok \xf0\x9f\x98\x80 \xc3 end"
        assert sum(size for _, size in iter_runes(data)) == len(data)


class TestDecoding:

    @pytest.mark.parametrize("text", ["", "plain", "let 日本 = 2", "😀 emoji", "é́"])
    def test_matches_utf8_decode(self, text):
        assert decode_runes(text.encode("utf-8")) == text

    def test_bytes_width(self):
        assert bytes_width("let 日本".encode("utf-8")) == 8

    def test_bytes_width_of_invalid_bytes(self):
        assert bytes_width(b"\xe6") == 1
