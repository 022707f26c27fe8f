"""
lintreport/render.py
════════════════════

Rich terminal rendering of a :class:`~lintreport.diagnostic.Diagnostic`.

Output shape
────────────
    workflow.yml:2:5: unknown key "日本" [syntax]
    2| let 日本 = 2
     |     ^~~~

The header is always printed.  The snippet and indicator lines follow
only when the source buffer actually contains the reported position; a
stale or truncated buffer degrades to the header alone rather than
raising.

Columns versus bytes
────────────────────
The column is taken as ``column - 1`` bytes into the UTF-8 encoded line.
Alignment is then re-derived from display widths: the indicator is
padded by the width of the bytes before the column and underlined by the
width of the token after it, so wide characters before or under the
caret are drawn correctly.  If the producer counted columns in cells
while the line holds multi-byte runes *before* the column, the byte
offset lands later than the producer intended.  That mismatch is
inherent to byte-addressed columns and is pinned by the test suite.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, TextIO, Union

from lintreport.diagnostic import Diagnostic
from lintreport.styling import Style, Styler
from lintreport.width import WidthFunc, bytes_width, decode_runes, iter_runes, rune_width

logger = logging.getLogger(__name__)

_STOP_RUNES = frozenset(" \t\r\n")

Source = Union[bytes, bytearray, str]


# ═════════════════════════════════════════════════════════════════════════
#  LINE EXTRACTION
# ═════════════════════════════════════════════════════════════════════════

def iter_lines(source: bytes) -> Iterator[bytes]:
    """Yield the ``\\n``-separated lines of *source*.

    A trailing ``\\r`` is dropped from every line and a terminator at the
    very end does not start an extra, empty line.
    """
    pos = 0
    end = len(source)
    while pos < end:
        nl = source.find(b"\n", pos)
        if nl < 0:
            nl = end
        line = source[pos:nl]
        if line.endswith(b"\r"):
            line = line[:-1]
        yield line
        pos = nl + 1


def extract_line(source: bytes, lnum: int) -> Optional[bytes]:
    """Return line *lnum* (1-based) of *source*, or ``None`` past the end."""
    for idx, line in enumerate(iter_lines(source), 1):
        if idx == lnum:
            return line
    return None


# ═════════════════════════════════════════════════════════════════════════
#  INDICATOR
# ═════════════════════════════════════════════════════════════════════════

def indicator(
    line: Union[bytes, str],
    column: int,
    width: WidthFunc = rune_width,
    caret: str = "^",
    filler: str = "~",
) -> str:
    """
    Build the caret/underline string for *column* (1-based) of *line*.

    The caret sits under the rune at byte offset ``column - 1``.  The
    underline covers the rest of the whitespace-delimited token starting
    there, measured in display cells; the caret itself takes the first
    cell.
    """
    if isinstance(line, str):
        line = line.encode("utf-8")
    start = column - 1

    underline = 0
    for rune, _ in iter_runes(line, start):
        if rune in _STOP_RUNES:
            break
        underline += width(rune)
    if underline > 0:
        underline -= 1  # room for the caret

    leading = bytes_width(memoryview(line)[:start], width)
    return " " * leading + caret + filler * underline


# ═════════════════════════════════════════════════════════════════════════
#  RENDERER
# ═════════════════════════════════════════════════════════════════════════

class Renderer:
    """
    Renders diagnostics as header, snippet and indicator lines.

    Holds configuration only, so a single instance can be shared and
    used from several threads as long as each stream is serialised by
    its owner.
    """

    def __init__(
        self,
        styler: Optional[Styler] = None,
        width: Optional[WidthFunc] = None,
        caret: str = "^",
        filler: str = "~",
    ) -> None:
        self._styler = styler
        self._width = width if width is not None else rune_width
        self.caret = caret
        self.filler = filler

    def styler_for(self, stream: TextIO) -> Styler:
        if self._styler is not None:
            return self._styler
        return Styler.for_stream(stream)

    def render(self, diag: Diagnostic, source: Optional[Source], stream: TextIO) -> None:
        """Write the report for *diag* to *stream*.

        Write failures are logged and otherwise ignored.
        """
        try:
            self._render(diag, source, stream, self.styler_for(stream))
        except (OSError, ValueError) as exc:
            logger.warning("failed to write diagnostic %s: %s", diag.plain_text(), exc)

    def indicator(self, line: Union[bytes, str], column: int) -> str:
        return indicator(line, column, self._width, self.caret, self.filler)

    # ── internals ────────────────────────────────────────────────────

    def _render(self, diag: Diagnostic, source: Optional[Source],
                stream: TextIO, styler: Styler) -> None:
        self._render_header(diag, stream, styler)

        if not source:
            return
        if isinstance(source, str):
            source = source.encode("utf-8")

        line = extract_line(bytes(source), diag.line)
        if line is None:
            logger.debug("no snippet for %s: source has fewer than %d lines",
                         diag.plain_text(), diag.line)
            return
        if len(line) < diag.column - 1:
            logger.debug("no snippet for %s: line %d is only %d bytes long",
                         diag.plain_text(), diag.line, len(line))
            return

        lnum = f"{diag.line}| "
        styler.write(stream, Style.MUTED, lnum)
        styler.plain(stream, decode_runes(line) + "\n")
        styler.write(stream, Style.MUTED, " " * (len(lnum) - 2) + "| ")
        styler.write(stream, Style.SUCCESS, self.indicator(line, diag.column))
        styler.plain(stream, "\n")

    @staticmethod
    def _render_header(diag: Diagnostic, stream: TextIO, styler: Styler) -> None:
        styler.write(stream, Style.PATH, diag.filepath)
        styler.write(stream, Style.MUTED, ":")
        styler.plain(stream, str(diag.line))
        styler.write(stream, Style.MUTED, ":")
        styler.plain(stream, str(diag.column))
        styler.write(stream, Style.MUTED, ": ")
        styler.write(stream, Style.EMPHASIS, diag.message)
        styler.write(stream, Style.MUTED, f" [{diag.kind}]\n")


__all__ = [
    "Renderer",
    "Source",
    "extract_line",
    "indicator",
    "iter_lines",
]
