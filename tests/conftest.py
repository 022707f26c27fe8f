# tests/conftest.py
"""
Shared fixtures for the lintreport test-suite.
"""

import io
import re

import pytest

from lintreport import Diagnostic, Renderer, Styler

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


class TtyStream(io.StringIO):
    """StringIO that claims to be a terminal."""

    def isatty(self) -> bool:
        return True


@pytest.fixture
def clean_colour_env(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def plain_renderer():
    return Renderer(styler=Styler(enabled=False))


@pytest.fixture
def make_diag():
    def _make(line=1, column=1, message="unexpected token",
              filepath="a.yml", kind="syntax"):
        return Diagnostic(
            message=message,
            filepath=filepath,
            line=line,
            column=column,
            kind=kind,
        )
    return _make
