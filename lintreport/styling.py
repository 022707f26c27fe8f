"""
lintreport/styling.py
═════════════════════

Semantic colouring for terminal reports, backed by ``termcolor``.

Callers never name colours directly.  They ask for a *role* (the file
path, a muted separator, the emphasised message, ...) and the
:class:`Styler` decides how that role looks, or whether it is styled at
all.  The on/off switch is an explicit constructor argument rather than
process-wide state, so a plain ``Styler(enabled=False)`` is all a test
needs.

Colour resolution for a given stream
────────────────────────────────────
  1. an explicit ``colour=True/False`` argument
  2. ``$NO_COLOR`` set            → off
  3. ``$FORCE_COLOR`` set         → on
  4. the stream is a TTY          → on, otherwise off
"""

from __future__ import annotations

import enum
import os
from typing import List, Optional, TextIO

from termcolor import colored


# ═════════════════════════════════════════════════════════════════════════
#  ROLES
# ═════════════════════════════════════════════════════════════════════════

class Style(enum.Enum):
    """
    Semantic styling roles.

    Each carries:
      • color — termcolor colour name (``None`` keeps the terminal default)
      • attrs — termcolor attribute names
    """

    PATH = ("path", "yellow", ())
    EMPHASIS = ("emphasis", None, ("bold",))
    WARNING = ("warning", "yellow", ())
    SUCCESS = ("success", "green", ())
    MUTED = ("muted", "dark_grey", ())

    def __init__(self, role: str, color: Optional[str], attrs: tuple) -> None:
        self.role = role
        self.color = color
        self.attrs: List[str] = list(attrs)


# ═════════════════════════════════════════════════════════════════════════
#  COLOUR SWITCH
# ═════════════════════════════════════════════════════════════════════════

def colour_enabled(stream: TextIO, colour: Optional[bool] = None) -> bool:
    """Decide whether output written to *stream* should be styled."""
    if colour is not None:
        return colour
    if "NO_COLOR" in os.environ:
        return False
    if "FORCE_COLOR" in os.environ:
        return True
    try:
        return hasattr(stream, "isatty") and stream.isatty()
    except (OSError, ValueError):
        # closed or detached streams
        return False


# ═════════════════════════════════════════════════════════════════════════
#  STYLER
# ═════════════════════════════════════════════════════════════════════════

class Styler:
    """Writes text to a stream, styled by semantic role when enabled."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    @classmethod
    def for_stream(cls, stream: TextIO, colour: Optional[bool] = None) -> Styler:
        """Build a styler whose switch follows :func:`colour_enabled`."""
        return cls(enabled=colour_enabled(stream, colour))

    def paint(self, role: Style, text: str) -> str:
        if not self.enabled or not text:
            return text
        # termcolor's own tty/env detection looks at sys.stdout, not at
        # the stream being written to; the decision is already made here.
        return colored(text, role.color, attrs=role.attrs or None, force_color=True)

    def write(self, stream: TextIO, role: Style, text: str) -> None:
        stream.write(self.paint(role, text))

    def plain(self, stream: TextIO, text: str) -> None:
        stream.write(text)

    def __repr__(self) -> str:
        return f"Styler(enabled={self.enabled})"


__all__ = [
    "Style",
    "Styler",
    "colour_enabled",
]
