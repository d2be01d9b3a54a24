"""Decide whether ANSI codes should be written at all.

Follows the NO_COLOR convention (https://no-color.org/): if the variable is
present, whatever its value, nothing is colored. Otherwise codes are only
emitted to interactive terminals, unless terminal checking has been turned
off for the current execution context.
"""

from __future__ import annotations

import contextlib
import contextvars
import os
import sys
from collections.abc import Iterator
from typing import IO, Any

_TERMINAL_CHECK: contextvars.ContextVar[bool] = contextvars.ContextVar(
    "colored_text_terminal_check", default=True
)


def terminal_check_enabled() -> bool:
    return _TERMINAL_CHECK.get()


def set_terminal_check(enabled: bool) -> contextvars.Token[bool]:
    """Enable or disable terminal detection for the calling context only.

    Returns the token from :meth:`contextvars.ContextVar.set` so callers can
    restore the previous value with :func:`reset_terminal_check`.
    """
    return _TERMINAL_CHECK.set(bool(enabled))


def reset_terminal_check(token: contextvars.Token[bool]) -> None:
    _TERMINAL_CHECK.reset(token)


@contextlib.contextmanager
def terminal_check(enabled: bool) -> Iterator[None]:
    token = set_terminal_check(enabled)
    try:
        yield
    finally:
        reset_terminal_check(token)


def _isatty(stream: IO[Any] | None) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        # closed or detached streams
        return False


def no_color_requested() -> bool:
    return "NO_COLOR" in os.environ


def should_colorize(stream: IO[Any] | None = None) -> bool:
    if no_color_requested():
        return False
    if not terminal_check_enabled():
        return True
    return _isatty(sys.stdout if stream is None else stream)
