# File: src/mstair/logwriter/base/config.py
"""
Execution context detection utilities.

This module decides whether ANSI color codes should be written to a given
stream. Overrides are kept in thread-local storage so a test (or a thread) can
force a mode without affecting other threads.

Exports:
- colors_enabled(): check or override whether color output is enabled.
- color_mode_context(): context manager that forces color on or off.
"""

from __future__ import annotations

import os
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any


_tls = threading.local()


@dataclass
class TLSAttrs:
    """Thread-local flags for environment context."""

    colors_enabled_override: bool | None = None


def _get_tls() -> TLSAttrs:
    """Return the current thread's TLSAttrs instance, initializing if needed."""
    try:
        return _tls.state
    except AttributeError:
        _tls.state = TLSAttrs()
        return _tls.state


def colors_enabled(
    stream: Any = None,
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Determine if ANSI color codes should be written to `stream`.

    Rules:
      - Explicit override (thread-local) wins.
      - NO_COLOR set to any non-empty value disables color.
      - FORCE_COLOR set to any non-empty value enables color.
      - Otherwise color is enabled only when the stream is a terminal.

    :param stream: The stream that will receive the output (default: sys.stderr).
    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    :return: True if color output is enabled, False otherwise.
    """
    tls = _get_tls()
    if unset_override:
        tls.colors_enabled_override = None
    if override is not None:
        tls.colors_enabled_override = override
        return override
    if tls.colors_enabled_override is not None:
        return tls.colors_enabled_override

    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True

    stream = sys.stderr if stream is None else stream
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:  # closed stream
        return False


@contextmanager
def color_mode_context(enabled: bool) -> Iterator[None]:
    """
    Force color output on or off for the current thread.

    Restores the previous override on exit. Nested contexts are supported.
    """
    tls = _get_tls()
    previous = tls.colors_enabled_override
    tls.colors_enabled_override = enabled
    try:
        yield
    finally:
        tls.colors_enabled_override = previous


# End of file: src/mstair/logwriter/base/config.py
