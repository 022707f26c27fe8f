"""
lintreport — Terminal Reports for Lint Diagnostics
==================================================

This package turns the positions and messages a linter produces into
reports a person can read at a terminal: a ``file:line:col`` header, the
offending source line and a caret/underline indicator aligned by display
width, so wide East-Asian characters and multi-byte runes do not push the
caret off its token.

Core modules
------------
diagnostic
    The immutable :class:`Diagnostic` value, its plain-text form and the
    ``error_at`` / ``errorf_at`` construction helpers.
render
    Line extraction, indicator computation and the :class:`Renderer`.
styling
    Semantic colour roles over ``termcolor`` with an explicit on/off switch.
width
    Rune display widths over ``wcwidth`` and lazy UTF-8 rune iteration.

Quick start
-----------
>>> import io
>>> from lintreport import Position, Renderer, Styler, error_at
>>> diag = error_at(Position(1, 5), "syntax", "unexpected key").with_filepath("a.yml")
>>> out = io.StringIO()
>>> Renderer(styler=Styler(enabled=False)).render(diag, b"foo bar: 1\\n", out)
>>> print(out.getvalue(), end="")
a.yml:1:5: unexpected key [syntax]
1| foo bar: 1
 |     ^~~~

Package layout
--------------
::

    lintreport/
    ├── __init__.py            ← this file
    ├── diagnostic.py
    ├── render.py
    ├── styling.py
    └── width.py
"""

from __future__ import annotations

from typing import List

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
__author__ = "lintreport contributors"
__license__ = "MIT"

from lintreport.diagnostic import (  # noqa: E402
    Diagnostic,
    LintError,
    Position,
    error_at,
    errorf_at,
)
from lintreport.render import Renderer, extract_line, indicator, iter_lines  # noqa: E402
from lintreport.styling import Style, Styler, colour_enabled  # noqa: E402
from lintreport.width import bytes_width, iter_runes, rune_width, string_width  # noqa: E402

__all__: List[str] = [
    "Diagnostic",
    "LintError",
    "Position",
    "Renderer",
    "Style",
    "Styler",
    "bytes_width",
    "colour_enabled",
    "error_at",
    "errorf_at",
    "extract_line",
    "indicator",
    "iter_lines",
    "iter_runes",
    "rune_width",
    "string_width",
]
