# File: src/mstair/logwriter/output_flags.py
"""
Bit flags controlling the metadata written in front of each log line.

The flags mirror the classic line-logger set: a date, a wall-clock time (with
optional microseconds), the caller's file and line, UTC rendering, and whether
the prefix goes in front of the message (MSG_PREFIX) or at the start of the
line.
"""

from __future__ import annotations

import re
from enum import IntFlag
from typing import Final


__all__ = ["OutputFlags"]

_FLAG_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;,| ]+")


class OutputFlags(IntFlag):
    NONE = 0
    DATE = 1  # 2009/01/23
    TIME = 2  # 01:23:23
    MICROSECONDS = 4  # 01:23:23.123123, implies TIME
    LONG_FILE = 8  # /a/b/c/d.py:23
    SHORT_FILE = 16  # d.py:23, overrides LONG_FILE
    UTC = 32  # render DATE/TIME in UTC
    MSG_PREFIX = 64  # prefix goes right before the message, after the header

    STD = DATE | TIME
    DEFAULT = TIME | MSG_PREFIX

    @classmethod
    def parse(cls, text: str) -> OutputFlags:
        """
        Parse a flag expression such as "date,time", "std|utc", "0" or "66".

        Names are case-insensitive; "short_file" and "shortfile" are equivalent.

        :raises ValueError: On an unknown flag name or a number outside the flag range.
        """
        flags = cls.NONE
        all_bits = 0
        for member in cls:
            all_bits |= member.value
        for fragment in _FLAG_SEPARATOR_RX.split(text.strip().strip("\"'")):
            if not fragment:
                continue
            if fragment.isdigit():
                value = int(fragment, 10)
                if value & ~all_bits:
                    raise ValueError(f"Unknown output flag bits in {value}")
                flags |= cls(value)
                continue
            name = fragment.upper().replace("-", "_")
            member = cls.__members__.get(name) or cls.__members__.get(_FLAG_ALIASES.get(name, ""))
            if member is None:
                raise ValueError(f"Unknown output flag: {fragment!r}")
            flags |= member
        return flags


_FLAG_ALIASES: dict[str, str] = {
    "LONGFILE": "LONG_FILE",
    "SHORTFILE": "SHORT_FILE",
    "MSGPREFIX": "MSG_PREFIX",
    "MICRO": "MICROSECONDS",
}


# End of file: src/mstair/logwriter/output_flags.py
