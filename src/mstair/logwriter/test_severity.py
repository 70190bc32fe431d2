from __future__ import annotations

import logging

import pytest

from mstair.logwriter.severity import Severity


@pytest.mark.parametrize(
    ("severity", "tag", "color"),
    [
        (Severity.ERROR, "[ERROR] ", "red"),
        (Severity.WARNING, "[WARNING] ", "yellow"),
        (Severity.DEBUG, "[DEBUG] ", "blue"),
        (Severity.FATAL, "[FATAL] ", "bright red"),
        (Severity.INFO, "[INFO] ", "white"),
    ],
)
def test_tag_and_color(severity: Severity, tag: str, color: str) -> None:
    assert severity.tag == tag
    assert severity.color == color


def test_every_severity_has_distinct_level() -> None:
    levels = {s.level for s in Severity}
    assert len(levels) == len(Severity)
    assert Severity.FATAL.level == logging.CRITICAL


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Severity.DEBUG, Severity.DEBUG),
        ("error", Severity.ERROR),
        (" Warning ", Severity.WARNING),
        ("WARN", Severity.WARNING),
        ("critical", Severity.FATAL),
        ("[FATAL]", Severity.FATAL),
        (logging.INFO, Severity.INFO),
        (logging.CRITICAL, Severity.FATAL),
    ],
)
def test_parse_accepts_names_and_levels(value: object, expected: Severity) -> None:
    assert Severity.parse(value) is expected


@pytest.mark.parametrize("value", ["verbose", "", 5, True, None])
def test_parse_rejects_unknown(value: object) -> None:
    with pytest.raises(ValueError):
        Severity.parse(value)
