"""Shared fixtures for colored_text tests."""

from __future__ import annotations

import io
import os
import sys

import pytest

from colored_text import terminal_check


class FakeStream(io.StringIO):
    """In-memory stream that claims (or denies) being a terminal."""

    def __init__(self, tty: bool) -> None:
        super().__init__()
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


@pytest.fixture(autouse=True)
def _no_color_unset(monkeypatch):
    """Start every test without NO_COLOR, whatever the outer shell has."""
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture(autouse=True)
def _colors_on():
    """Captured stdout is never a terminal; skip that check unless a test opts back in."""
    with terminal_check(False):
        yield


@pytest.fixture
def tty_stream():
    return FakeStream(True)


@pytest.fixture
def pipe_stream():
    return FakeStream(False)


@pytest.fixture(autouse=True)
def _add_examples_to_path():
    """Ensure examples/ is importable."""
    examples_dir = os.path.join(os.path.dirname(__file__), "..", "examples")
    examples_dir = os.path.abspath(examples_dir)
    if examples_dir not in sys.path:
        sys.path.insert(0, examples_dir)
    yield
    if examples_dir in sys.path:
        sys.path.remove(examples_dir)
