"""
lintreport/width.py
═══════════════════

Terminal display width of Unicode text.

A column reported by a linter counts terminal cells, not bytes and not
code points.  East-Asian wide characters take two cells, combining marks
take none, and a multi-byte UTF-8 sequence is still a single rune.  This
module is the single place that maps runes to cells so the indicator
under a source line lines up with what the terminal actually draws.

Width lookups are delegated to the ``wcwidth`` library.  Any callable
with the signature ``(str) -> int`` can be used in its place; every
function here takes the width function as a parameter.

Decoding works directly on a ``memoryview`` of the line so that scanning
from a byte offset never copies the rest of the buffer.
"""

from __future__ import annotations

from typing import Callable, Iterator, Tuple, Union

from wcwidth import wcwidth

WidthFunc = Callable[[str], int]

REPLACEMENT_CHAR = "�"

_BytesLike = Union[bytes, bytearray, memoryview]


# ═════════════════════════════════════════════════════════════════════════
#  RUNE WIDTH
# ═════════════════════════════════════════════════════════════════════════

def rune_width(ch: str) -> int:
    """Return the number of terminal columns *ch* occupies: 0, 1 or 2.

    ``wcwidth`` reports -1 for control characters (TAB included); those
    are counted as zero-width, which is how terminal column counters
    treat them.
    """
    w = wcwidth(ch)
    return w if w > 0 else 0


def string_width(text: str, width: WidthFunc = rune_width) -> int:
    """Sum of the display widths of every code point in *text*."""
    return sum(width(ch) for ch in text)


# ═════════════════════════════════════════════════════════════════════════
#  UTF-8 DECODING
# ═════════════════════════════════════════════════════════════════════════

def _sequence_length(lead: int) -> int:
    """Expected UTF-8 sequence length for a lead byte, 0 if it cannot lead."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def iter_runes(data: _BytesLike, start: int = 0) -> Iterator[Tuple[str, int]]:
    """Decode UTF-8 lazily from byte offset *start*.

    Yields ``(rune, size)`` pairs where *size* is the number of bytes the
    rune consumed.  A malformed or truncated sequence yields
    ``(REPLACEMENT_CHAR, 1)`` and decoding resumes at the next byte, so
    every byte of the input is accounted for exactly once.
    """
    view = memoryview(data)
    end = len(view)
    pos = start
    while pos < end:
        n = _sequence_length(view[pos])
        if n == 1:
            yield chr(view[pos]), 1
            pos += 1
            continue
        if n == 0 or pos + n > end:
            yield REPLACEMENT_CHAR, 1
            pos += 1
            continue
        try:
            rune = bytes(view[pos:pos + n]).decode("utf-8")
        except UnicodeDecodeError:
            yield REPLACEMENT_CHAR, 1
            pos += 1
            continue
        yield rune, n
        pos += n


def decode_runes(data: _BytesLike) -> str:
    """Decode *data* with the same rune boundaries :func:`iter_runes` uses."""
    return "".join(rune for rune, _ in iter_runes(data))


def bytes_width(data: _BytesLike, width: WidthFunc = rune_width) -> int:
    """Display width of UTF-8 encoded *data* without building a string."""
    return sum(width(rune) for rune, _ in iter_runes(data))


__all__ = [
    "REPLACEMENT_CHAR",
    "WidthFunc",
    "bytes_width",
    "decode_runes",
    "iter_runes",
    "rune_width",
    "string_width",
]
