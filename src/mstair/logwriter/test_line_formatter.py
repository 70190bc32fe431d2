# File: src/mstair/logwriter/test_line_formatter.py
"""
Tests for LineFormatter header rendering and the color helpers.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

import pytest
from colorama import Fore, Style

from mstair.logwriter.line_formatter import (
    K_LINE_PREFIX,
    LineFormatter,
    colorize,
    get_color_code,
)
from mstair.logwriter.output_flags import OutputFlags


# 2021-03-04 05:06:07.080910 UTC
_CREATED = datetime(2021, 3, 4, 5, 6, 7, 80910, tzinfo=timezone.utc).timestamp()


def _record(msg: str = "hello", prefix: str = "[INFO] ") -> logging.LogRecord:
    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="/src/pkg/module.py",
        lineno=42,
        msg=msg,
        args=None,
        exc_info=None,
    )
    record.created = _CREATED
    setattr(record, K_LINE_PREFIX, prefix)
    return record


# ----------------------------------------------------------------------
# Header
# ----------------------------------------------------------------------


def test_no_flags_is_prefix_then_message() -> None:
    assert LineFormatter(OutputFlags.NONE).format(_record()) == "[INFO] hello"


def test_utc_date_and_time() -> None:
    fmt = LineFormatter(OutputFlags.STD | OutputFlags.UTC | OutputFlags.MSG_PREFIX)
    assert fmt.format(_record()) == "2021/03/04 05:06:07 [INFO] hello"


def test_microseconds_imply_time() -> None:
    fmt = LineFormatter(OutputFlags.MICROSECONDS | OutputFlags.UTC | OutputFlags.MSG_PREFIX)
    assert fmt.format(_record()) == "05:06:07.080910 [INFO] hello"


def test_local_time_has_hh_mm_ss_shape() -> None:
    line = LineFormatter(OutputFlags.DEFAULT).format(_record())
    assert re.fullmatch(r"\d{2}:\d{2}:\d{2} \[INFO\] hello", line)


def test_short_file_wins_over_long_file() -> None:
    fmt = LineFormatter(OutputFlags.SHORT_FILE | OutputFlags.LONG_FILE | OutputFlags.MSG_PREFIX)
    assert fmt.format(_record()) == "module.py:42: [INFO] hello"


def test_long_file() -> None:
    fmt = LineFormatter(OutputFlags.LONG_FILE | OutputFlags.MSG_PREFIX)
    assert fmt.format(_record()) == "/src/pkg/module.py:42: [INFO] hello"


def test_without_msg_prefix_prefix_starts_the_line() -> None:
    fmt = LineFormatter(OutputFlags.TIME | OutputFlags.UTC)
    assert fmt.format(_record()) == "[INFO] 05:06:07 hello"


def test_missing_prefix_attribute_is_empty() -> None:
    record = _record()
    delattr(record, K_LINE_PREFIX)
    assert LineFormatter(OutputFlags.NONE).format(record) == "hello"


# ----------------------------------------------------------------------
# Colors
# ----------------------------------------------------------------------


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("red", Fore.RED),
        ("MAGENTA", Fore.MAGENTA),
        ("bright red", Fore.LIGHTRED_EX),
        ("light_red", Fore.LIGHTRED_EX),
        ("LIGHTBLUE_EX", Fore.LIGHTBLUE_EX),
        (None, Fore.RESET),
        ("no-such-color", Fore.RESET),
        ("#ff0080", "\033[38;2;255;0;128m"),
    ],
)
def test_get_color_code(key: object, expected: str) -> None:
    assert get_color_code(key) == expected


def test_colorize_wraps_and_resets() -> None:
    assert colorize("x", "yellow") == Fore.YELLOW + "x" + Style.RESET_ALL


def test_colorize_disabled_or_empty_is_identity() -> None:
    assert colorize("x", "yellow", enabled=False) == "x"
    assert colorize("", "yellow") == ""


# End of file: src/mstair/logwriter/test_line_formatter.py
