# File: src/mstair/logwriter/line_formatter.py
import logging
import os
import re
from datetime import datetime
from typing import Any

import pytz
from colorama import Fore, Style

from mstair.logwriter.output_flags import OutputFlags


__all__ = ["K_LINE_PREFIX", "LineFormatter", "colorize", "get_color_code", "rgb_code"]


K_LINE_PREFIX = "line_prefix"
"""LogRecord attribute (passed through `extra`) holding the custom prefix plus severity tag."""


def rgb_code(r: int, g: int, b: int) -> str:
    """
    Convert RGB values to ANSI escape code for terminal color output.

    :param r: Red component (0-255)
    :param g: Green component (0-255)
    :param b: Blue component (0-255)
    :return str: ANSI escape code for the specified RGB color.
    """
    return f"\033[38;2;{max(0, min(255, r))};{max(0, min(255, g))};{max(0, min(255, b))}m"


def get_color_code(key: Any = None) -> str:
    # Any key that is effectively False or RESET will return the reset color code
    if key in {"", "RESET"} or key is None:
        return Fore.RESET

    # Check if the key is a hex color code
    if isinstance(key, str) and key.startswith("#"):
        return rgb_code(*[int(key[i : i + 2], 16) for i in (1, 3, 5)])

    # Clean up the key then check if it is a valid color from the Fore module
    _clean_key = re.sub(r"[\s_-]+", "", str(key).upper().removesuffix("_EX"))
    if "BRIGHT" in _clean_key:
        _clean_key = _clean_key.replace("BRIGHT", "LIGHT")
    if _clean_key.startswith("LIGHT"):
        _clean_key += "_EX"
    if _clean_key in dir(Fore):
        return getattr(Fore, _clean_key)

    # Fall back to the reset color code
    return Fore.RESET


def colorize(text: str, key: Any, enabled: bool = True) -> str:
    """Wrap `text` in the color for `key` followed by a full reset; empty text stays empty."""
    if not enabled or not text:
        return text
    return get_color_code(key) + text + Style.RESET_ALL


class LineFormatter(logging.Formatter):
    """
    Formatter that renders `<header><prefix><message>` for LogWriter lines.

    The header is built from OutputFlags (date, time, microseconds, caller file)
    and the prefix is taken from the record's `line_prefix` attribute. Without
    OutputFlags.MSG_PREFIX the prefix starts the line instead.
    """

    def __init__(self, flags: OutputFlags = OutputFlags.DEFAULT) -> None:
        super().__init__()
        self.flags = OutputFlags(flags)

    def format(self, record: logging.LogRecord) -> str:
        prefix: str = getattr(record, K_LINE_PREFIX, "")
        header = self.format_header(record)
        message = record.getMessage()
        if self.flags & OutputFlags.MSG_PREFIX:
            return header + prefix + message
        return prefix + header + message

    def format_header(self, record: logging.LogRecord) -> str:
        flags = self.flags
        header = ""
        if flags & (OutputFlags.DATE | OutputFlags.TIME | OutputFlags.MICROSECONDS):
            header += self.formatTime(record)
        if flags & (OutputFlags.SHORT_FILE | OutputFlags.LONG_FILE):
            header += self.format_fileAndLine(record.pathname, record.lineno)
        return header

    def formatTime(self, record: Any, datefmt: str | None = None) -> str:
        flags = self.flags
        if flags & OutputFlags.UTC:
            _datetime = datetime.fromtimestamp(record.created, pytz.utc)
        else:
            _datetime = datetime.fromtimestamp(record.created)

        _result = ""
        if flags & OutputFlags.DATE:
            _result += _datetime.strftime("%Y/%m/%d ")
        if flags & (OutputFlags.TIME | OutputFlags.MICROSECONDS):
            _result += _datetime.strftime("%H:%M:%S")
            if flags & OutputFlags.MICROSECONDS:
                _result += _datetime.strftime(".%f")
            _result += " "
        return _result

    def format_fileAndLine(self, file: str, lineno: int) -> str:
        if self.flags & OutputFlags.SHORT_FILE:
            file = os.path.basename(file)
        return f"{file or '???'}:{lineno}: "


# End of file: src/mstair/logwriter/line_formatter.py
