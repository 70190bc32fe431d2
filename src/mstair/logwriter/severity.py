# File: src/mstair/logwriter/severity.py
"""
Severity levels understood by LogWriter.

Each severity carries its tag text (e.g. "[ERROR] "), the color of that tag,
and the stdlib logging level used when the line is handed to `logging`.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, NamedTuple


__all__ = ["Severity", "SeverityStyle"]


class SeverityStyle(NamedTuple):
    tag: str
    color: str
    level: int


class Severity(Enum):
    INFO = "INFO"
    ERROR = "ERROR"
    WARNING = "WARNING"
    DEBUG = "DEBUG"
    FATAL = "FATAL"

    @property
    def style(self) -> SeverityStyle:
        return _SEVERITY_STYLES[self]

    @property
    def tag(self) -> str:
        """Bit-exact tag text including the trailing space, e.g. "[WARNING] "."""
        return _SEVERITY_STYLES[self].tag

    @property
    def color(self) -> str:
        return _SEVERITY_STYLES[self].color

    @property
    def level(self) -> int:
        return _SEVERITY_STYLES[self].level

    @classmethod
    def parse(cls, value: Any) -> Severity:
        """
        Return the Severity for a Severity, a case-insensitive name, or a stdlib level.

        "CRITICAL" and logging.CRITICAL both map to FATAL; "WARN" maps to WARNING.

        :raises ValueError: If the value does not name a severity.
        """
        if isinstance(value, Severity):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            for severity, style in _SEVERITY_STYLES.items():
                if style.level == value:
                    return severity
            raise ValueError(f"No severity for logging level {value!r}")
        if isinstance(value, str):
            name = value.strip().strip("[]").strip().upper()
            name = _SEVERITY_ALIASES.get(name, name)
            if name in cls.__members__:
                return cls[name]
        raise ValueError(f"Unknown severity: {value!r}")


_SEVERITY_STYLES: dict[Severity, SeverityStyle] = {
    Severity.INFO: SeverityStyle("[INFO] ", "white", logging.INFO),
    Severity.ERROR: SeverityStyle("[ERROR] ", "red", logging.ERROR),
    Severity.WARNING: SeverityStyle("[WARNING] ", "yellow", logging.WARNING),
    Severity.DEBUG: SeverityStyle("[DEBUG] ", "blue", logging.DEBUG),
    Severity.FATAL: SeverityStyle("[FATAL] ", "bright red", logging.CRITICAL),
}
_SEVERITY_ALIASES: dict[str, str] = {"CRITICAL": "FATAL", "WARN": "WARNING"}

_missing = set(Severity) - set(_SEVERITY_STYLES)
if _missing:
    raise RuntimeError(f"Severity styles missing for: {sorted(s.name for s in _missing)}")


# End of file: src/mstair/logwriter/severity.py
