"""
lintreport/diagnostic.py
════════════════════════

The diagnostic value produced by lint rules.

A :class:`Diagnostic` is created once per detected problem, handed to a
renderer and thrown away.  It never changes after construction.  Two
renderings are available:

  • Plain text : ``<file>:<line>:<column>: <message> [<kind>]``, stable and
                 line-oriented, suitable for grep or editor jump lists.
  • Rich       : header, source snippet and caret indicator, see
                 :mod:`lintreport.render`.

Usage
─────
    from lintreport import Position, errorf_at

    diag = errorf_at(Position(3, 7), "syntax", "unexpected token %r", "}")
    diag = diag.with_filepath("workflow.yml")
    print(diag.plain_text())
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, TextIO, Union

if TYPE_CHECKING:
    from lintreport.styling import Styler


def _check_position(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be an integer >= 1, got {value!r}")


@dataclass(frozen=True)
class Position:
    """A 1-based line/column point in a source file."""
    line: int
    column: int

    def __post_init__(self) -> None:
        _check_position("line", self.line)
        _check_position("column", self.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Diagnostic:
    """
    One problem found by a lint rule.

    ``column`` is counted in terminal cells by the producer and is used
    as a byte offset into the UTF-8 encoded line when rendering.  For
    lines that are ASCII up to the column the two agree.
    """

    message: str
    filepath: str
    line: int
    column: int
    kind: str

    def __post_init__(self) -> None:
        _check_position("line", self.line)
        _check_position("column", self.column)

    @property
    def position(self) -> Position:
        return Position(self.line, self.column)

    def plain_text(self) -> str:
        return f"{self.filepath}:{self.line}:{self.column}: {self.message} [{self.kind}]"

    def __str__(self) -> str:
        return self.plain_text()

    def with_filepath(self, filepath: str) -> Diagnostic:
        """Return a copy of this diagnostic attributed to *filepath*."""
        return dataclasses.replace(self, filepath=filepath)

    def pretty_print(
        self,
        stream: TextIO,
        source: Optional[Union[bytes, str]] = None,
        styler: Optional[Styler] = None,
    ) -> None:
        """
        Print the rich report for this diagnostic to *stream*.

        When *source* is ``None`` or empty only the header line is
        printed.  When *styler* is omitted, colour follows the stream
        (see :func:`lintreport.styling.colour_enabled`).
        """
        from lintreport.render import Renderer

        Renderer(styler=styler).render(self, source, stream)


class LintError(Exception):
    """An exception carrying a :class:`Diagnostic`."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.plain_text())
        self.diagnostic = diagnostic


# ═════════════════════════════════════════════════════════════════════════
#  CONSTRUCTION HELPERS
# ═════════════════════════════════════════════════════════════════════════

def error_at(pos: Position, kind: str, message: str) -> Diagnostic:
    """Create a diagnostic at *pos* with a literal message and no file path."""
    return Diagnostic(
        message=message,
        filepath="",
        line=pos.line,
        column=pos.column,
        kind=kind,
    )


def errorf_at(pos: Position, kind: str, fmt: str, *args: Any) -> Diagnostic:
    """Like :func:`error_at`, formatting the message as ``fmt % args``.

    Without arguments *fmt* is used verbatim, so a stray ``%`` in a
    literal message is harmless.
    """
    message = fmt % args if args else fmt
    return error_at(pos, kind, message)


__all__ = [
    "Diagnostic",
    "LintError",
    "Position",
    "error_at",
    "errorf_at",
]
