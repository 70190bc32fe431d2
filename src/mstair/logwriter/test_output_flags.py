from __future__ import annotations

import pytest

from mstair.logwriter.output_flags import OutputFlags


def test_composites() -> None:
    assert OutputFlags.STD == OutputFlags.DATE | OutputFlags.TIME
    assert OutputFlags.DEFAULT == OutputFlags.TIME | OutputFlags.MSG_PREFIX


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("std", OutputFlags.DATE | OutputFlags.TIME),
        ("date,time", OutputFlags.DATE | OutputFlags.TIME),
        ("time | utc", OutputFlags.TIME | OutputFlags.UTC),
        ("shortfile;micro", OutputFlags.SHORT_FILE | OutputFlags.MICROSECONDS),
        ("long-file", OutputFlags.LONG_FILE),
        ("0", OutputFlags.NONE),
        ("66", OutputFlags.TIME | OutputFlags.MSG_PREFIX),
        ("", OutputFlags.NONE),
        ('"date"', OutputFlags.DATE),
    ],
)
def test_parse(text: str, expected: OutputFlags) -> None:
    assert OutputFlags.parse(text) == expected


@pytest.mark.parametrize("text", ["timestamp", "date,bogus", "128"])
def test_parse_rejects_unknown(text: str) -> None:
    with pytest.raises(ValueError):
        OutputFlags.parse(text)
